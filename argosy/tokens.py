"""
Argument tokenizer.

Tokenizer.tokenize() walks argv once and classifies every token, first rule
that matches wins:

1. boolean:   -x, --flag            → True
              --flag=false          → False
2. number:    --count=42, --ratio=.5 → int / float
3. string:    --name=anything       → the text after the first "="
4. command:   a bare token equal to a command name
5. alias:     a bare token equal to a command alias (stored as the command name)
6. argument:  any other token that does not start with "-"

A dash token matching none of the first three rules ("-ab", "--name=", "-",
"--") is kept aside as malformed so the parser can report it.

Option keys are the token without its leading dashes, cut at "=", converted
to camelCase ("--root-path=x" → "rootPath") and resolved through the
AliasResolver against the command seen so far.
"""
import re
from enum import StrEnum
from types import MappingProxyType
from typing import Any, NamedTuple

from .aliases import AliasResolver
from .specs import AliasPolicy
from .utils import camelize
from .values import coerce_number

FLAG = re.compile(r"-\w|--[^=]+")
ASSIGNMENT = re.compile(r"--[^=]+=.+")


class Kind(StrEnum):
    """
    classification of a recognized token, as recorded in the kind-trace.
    """
    COMMAND = "command"
    OPTION = "option"
    ARG = "arg"


class Token(NamedTuple):
    """
    one argv entry after classification.

    - index: position in argv
    - text: the raw token
    - kind: Kind, or None for a malformed token
    - key: canonical option name (options) or command name (commands)
    - value: parsed option value, or the positional text
    - inline: verbatim text after the first "=" (options written --key=value)
    """
    index: int
    text: str
    kind: Kind | None
    key: str | None = None
    value: Any = None
    inline: str | None = None


class Scan(NamedTuple):
    """
    everything tokenize() learned from one argv.

    - command: the last command token seen (canonical name), or None
    - args: positional arguments in order
    - options: option name → value, later occurrences overriding earlier ones
    - tokens: every classified token, in argv order
    - sources: option name → the token that supplied its value
    - malformed: dash tokens matching no rule
    """
    command: str | None
    args: tuple
    options: MappingProxyType
    tokens: tuple
    sources: MappingProxyType
    malformed: tuple

    @property
    def kinds(self):
        """
        the kind-trace: one Kind per classified token.
        """
        return tuple(token.kind for token in self.tokens)

    @property
    def results(self):
        """
        flat accumulator view: {"args": [...], "command"?: name, <option>: value}.
        """
        results = {"args": list(self.args)}
        if self.command is not None:
            results["command"] = self.command
        return results | dict(self.options)


def parse_literal(text, /):
    """
    Classify a dash token by the literal rules.

    Returns (value, inline) where inline is the text after the first "=" (None
    for bare flags), or None when the token is malformed.
    """
    if FLAG.fullmatch(text):
        return True, None
    if not ASSIGNMENT.fullmatch(text):
        return None

    inline = text.partition("=")[2]
    if inline == "false":
        return False, inline
    if (number := coerce_number(inline)) is not None:
        return number, inline
    return inline, inline


def parse_key(text, /):
    """
    Reduce a dash token to its camelCase option key.

    >>> parse_key("--root-path=./app")
    'rootPath'
    """
    return camelize(re.sub(r"^-{1,2}", "", text).partition("=")[0])


class Tokenizer:
    """
    Classify argv tokens against a fixed command list.

    parameters
    - commands: every Command of the schema (global pseudo-command included).
    - policy: option alias policy (AliasPolicy).
    """

    def __init__(self, commands, policy=AliasPolicy.SCOPED):
        commands = tuple(commands)
        self._names = {}
        for command in commands:
            if command.pseudo:
                continue
            for alias in command.aliases:
                self._names.setdefault(alias, command.command)
        # the pseudo-command is never selectable from argv
        self._names |= {command.command: command.command for command in commands if not command.pseudo}
        self._resolver = AliasResolver(commands, policy)

    def tokenize(self, argv, /):
        command = None
        args = []
        options = {}
        sources = {}
        tokens = []
        malformed = []

        for index, text in enumerate(argv):
            if not isinstance(text, str):
                raise TypeError("argv entries must be strings, got %s" % type(text).__name__)

            if text.startswith("-"):
                if (literal := parse_literal(text)) is None:
                    malformed.append(Token(index, text, None))
                    continue
                value, inline = literal
                key = parse_key(text)
                if (name := self._resolver.resolve(key, command)) is None:
                    name = key
                token = Token(index, text, Kind.OPTION, name, value, inline)
                options[name] = value
                sources[name] = token
            elif text in self._names:
                command = self._names[text]
                token = Token(index, text, Kind.COMMAND, command)
            else:
                args.append(text)
                token = Token(index, text, Kind.ARG, value=text)

            tokens.append(token)

        return Scan(
            command,
            tuple(args),
            MappingProxyType(options),
            tuple(tokens),
            MappingProxyType(sources),
            tuple(malformed),
        )


__all__ = (
    "Kind",
    "Token",
    "Scan",
    "Tokenizer",
    "parse_literal",
    "parse_key",
)

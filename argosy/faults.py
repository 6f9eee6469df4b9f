"""
Argosy faults (schema errors and parse issues) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every schema rule and
  parse issue. Codes are grouped by domain to keep copy consistent and make
  logs/searches predictable.
- SchemaDefinitionError: programmer errors in the embedding application's
  schema (duplicates, bad spellings, short non-boolean options). Raised before
  any argv is read; one subclass per rule.
- Issue: one user-input problem (field path + message + code). Parse failures
  collect every issue instead of stopping at the first one.
- IssueError / ArgumentsError: exception forms of issues, for callers that
  prefer raising (ArgumentsError is an ExceptionGroup of IssueError).

UX goals
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType
from typing import NamedTuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - schema definition (21xxx)
      • DUPLICATE_COMMAND, INVALID_COMMAND_NAME, DUPLICATE_COMMAND_ALIAS,
        INVALID_COMMAND_ALIAS, COMMAND_ALIAS_CONFLICT, DUPLICATE_OPTION,
        INVALID_OPTION_NAME, RESERVED_OPTION, DUPLICATE_OPTION_ALIAS,
        INVALID_OPTION_ALIAS, SHORT_OPTION
    - parse/validation (22xxx)
      • MALFORMED_TOKEN, UNRECOGNIZED_OPTION, MISSING_OPTION, INVALID_VALUE,
        INVALID_ARGUMENTS
    - syntax (23xxx)
      • COMMAND_NOT_FIRST, MULTIPLE_COMMANDS

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- schema definition errors (21xxx) ---
    DUPLICATE_COMMAND           = 21101
    INVALID_COMMAND_NAME        = 21102
    DUPLICATE_COMMAND_ALIAS     = 21103
    INVALID_COMMAND_ALIAS       = 21104
    COMMAND_ALIAS_CONFLICT      = 21105
    DUPLICATE_OPTION            = 21111
    INVALID_OPTION_NAME         = 21112
    RESERVED_OPTION             = 21113
    DUPLICATE_OPTION_ALIAS      = 21114
    INVALID_OPTION_ALIAS        = 21115
    SHORT_OPTION                = 21116

    # --- parse/validation issues (22xxx) ---
    MALFORMED_TOKEN             = 22101
    UNRECOGNIZED_OPTION         = 22111
    MISSING_OPTION              = 22112
    INVALID_VALUE               = 22113
    INVALID_ARGUMENTS           = 22121

    # --- syntax issues (23xxx) ---
    COMMAND_NOT_FIRST           = 23101
    MULTIPLE_COMMANDS           = 23102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def palette(defaults, /, *, colorful=True):
    """
    build the (styler, text) pair used by every renderer.

    - defaults: mapping of style keys to rich styles, merged with __styles__
      from __main__ so hosts can override any entry.
    - colorful: when False, styles are dropped and plain text is produced.
    """
    styles = defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    return styler, text


def program():
    """
    display name of the running program (__prog__ in __main__, else the script name).
    """
    main = __import__("__main__")
    if prog := getattr(main, "__prog__", None):
        return prog
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "cli"


class SchemaDefinitionError(Exception):
    """
    base of every schema definition error.

    carries the message and read-only options:
    - code: FaultCode of the violated rule
    - title: short headline
    - subject: the offending command/alias/option string
    - hint: one actionable sentence
    - command: owning command name (option rules only)
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        styler, text = palette({
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        }, colorful=self.options.get("colorful", True))

        header = Text.assemble(
            "[ ",
            text(program(), styler("prog-name")),
            " — ",
            text(self.options["code"].normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint"), styler("hint")))

        if self.options.get("fancy", False):
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)


class DuplicateCommandError(SchemaDefinitionError): ...
class InvalidCommandNameError(SchemaDefinitionError): ...
class DuplicateCommandAliasError(SchemaDefinitionError): ...
class InvalidCommandAliasError(SchemaDefinitionError): ...
class CommandAliasConflictError(SchemaDefinitionError): ...
class DuplicateOptionError(SchemaDefinitionError): ...
class InvalidOptionNameError(SchemaDefinitionError): ...
class ReservedOptionError(SchemaDefinitionError): ...
class DuplicateOptionAliasError(SchemaDefinitionError): ...
class InvalidOptionAliasError(SchemaDefinitionError): ...
class ShortOptionError(SchemaDefinitionError): ...


class Issue(NamedTuple):
    """
    one user-input problem found while parsing.

    - path: tuple locating the problem; the option name for option fields,
      ("args", index) for positionals, ("argv", index) for raw tokens.
    - message: lowercase, one sentence.
    - code: FaultCode.
    """
    path: tuple
    message: str
    code: FaultCode

    def __str__(self):
        return "[ %s ] : %s" % (".".join(map(str, self.path)) or "-", self.message)


class IssueError(Exception):
    """
    exception form of a single Issue.
    """

    def __init__(self, issue, /):
        super().__init__(str(issue))
        self.issue = issue


class ArgumentsError(ExceptionGroup):
    """
    every issue of a failed parse, as an exception group of IssueError.
    """

    def __new__(cls, issues):
        return super().__new__(cls, "invalid arguments", [IssueError(issue) for issue in issues])

    def __init__(self, issues):
        self.issues = tuple(issues)
        super().__init__("invalid arguments", self.exceptions)

    def derive(self, excs):
        return ExceptionGroup(self.message, excs)


__all__ = (
    "FaultCode",
    "SchemaDefinitionError",
    "DuplicateCommandError",
    "InvalidCommandNameError",
    "DuplicateCommandAliasError",
    "InvalidCommandAliasError",
    "CommandAliasConflictError",
    "DuplicateOptionError",
    "InvalidOptionNameError",
    "ReservedOptionError",
    "DuplicateOptionAliasError",
    "InvalidOptionAliasError",
    "ShortOptionError",
    "Issue",
    "IssueError",
    "ArgumentsError",
)

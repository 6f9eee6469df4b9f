"""
Help projection: schema → plain help tree.

project() is pure: it reads the command list and returns immutable named
tuples, leaving presentation to argosy.render (or to the host application).

Option syntax is what a user would type:
- one-character names: -v
- booleans:            --dry-run
- strings:             --root-path="string"
- numbers:             --retries=number
- literals:            --level=3, --mode="debug"
"""
from typing import NamedTuple

from .specs import NO_COMMAND
from .utils import flagify
from .values import ValueKind


class OptionHelp(NamedTuple):
    name: str
    syntax: str
    optional: bool
    description: str | None
    example: str | None
    aliases: tuple


class CommandHelp(NamedTuple):
    name: str
    description: str | None
    example: str | None
    aliases: tuple
    arguments: str | None
    options: tuple


class GlobalHelp(NamedTuple):
    arguments: str | None
    options: tuple


class HelpTree(NamedTuple):
    name: str | None
    description: str | None
    usage: str | None
    globals: GlobalHelp
    commands: tuple

    def command(self, name, /):
        """
        the CommandHelp whose name or alias is `name`, or None.
        """
        for command in self.commands:
            if name == command.name or name in command.aliases:
                return command
        return None


def option_syntax(option, /):
    """
    Render the help syntax of an Option.
    """
    flag = flagify(option.name)
    if len(option.name) == 1:
        return flag

    value = option.value
    match value.kind:
        case ValueKind.BOOLEAN:
            return flag
        case ValueKind.NUMBER:
            return "%s=number" % flag
        case ValueKind.STRING:
            return '%s="string"' % flag
        case ValueKind.LITERAL if isinstance(value.literal, str):
            return '%s="%s"' % (flag, value.literal)
        case ValueKind.LITERAL:
            return "%s=%s" % (flag, value.literal)


def _option(option):
    return OptionHelp(
        option.name,
        option_syntax(option),
        not option.value.required,
        option.description,
        option.example,
        tuple(map(flagify, option.aliases)),
    )


def project(commands, /, name=None, description=None, usage=None):
    """
    Build the HelpTree of a command list.

    parameters
    - commands: every Command (the global pseudo-command, if present, feeds
      HelpTree.globals; the others become HelpTree.commands in order).
    - name / description / usage: CLI-level metadata copied as-is.
    """
    root = None
    entries = []
    for command in commands:
        if command.command == NO_COMMAND:
            root = command
            continue
        entries.append(CommandHelp(
            command.command,
            command.description,
            command.example,
            command.aliases,
            command.arguments.description,
            tuple(map(_option, command.options)),
        ))

    if root is None:
        globals = GlobalHelp(None, ())
    else:
        globals = GlobalHelp(root.arguments.description, tuple(map(_option, root.options)))

    return HelpTree(name, description, usage, globals, tuple(entries))


__all__ = (
    "OptionHelp",
    "CommandHelp",
    "GlobalHelp",
    "HelpTree",
    "project",
    "option_syntax",
)

"""
Static schema validation.

validate_schema() walks the full command list (the global pseudo-command
included) and raises the first SchemaDefinitionError it meets. Checks run in a
fixed order and short-circuit:

1. duplicate command names
2. command name spelling (kebab-case, "build", "install-apk")
3. duplicate command aliases
4. command alias spelling
5. a string used both as a command name and as an alias
6. per command: duplicate option names
7. option name spelling (camelCase, or one lowercase letter)
8. option names "command" and "args" (result keys) and "get", "items", "keys",
   "values" (ParseResult methods)
9. per command: duplicate option aliases
10. option alias spelling
11. one-character name or alias on a non-boolean option

This is a development-time safety net: it is quadratic in the schema size and
the parser only runs it when ParseOptions.validate is true.
"""
import re

from .faults import *

COMMAND_PATTERN = re.compile(r"[a-z]+-?[a-z]+")
OPTION_PATTERN = re.compile(r"[a-z]+([A-Z][a-z]*)*|[a-z]")
RESERVED = frozenset({"command", "args", "get", "items", "keys", "values"})


def _duplicate(items):
    """
    first item seen twice, or None.
    """
    seen = set()
    for item in items:
        if item in seen:
            return item
        seen.add(item)
    return None


def _misspelled(items, pattern):
    """
    first item not matching the pattern, or None.
    """
    return next((item for item in items if not pattern.fullmatch(item)), None)


def validate_schema(commands, /):
    """
    Validate a command list and raise on the first definition error.

    parameters
    - commands: iterable of Command (global pseudo-command included).

    raises
    - a SchemaDefinitionError subclass naming the offending string in
      `options["subject"]` and the violated rule in `options["code"]`.
    """
    commands = tuple(commands)

    names = [command.command for command in commands]
    if (subject := _duplicate(names)) is not None:
        raise DuplicateCommandError(
            "command %r is defined more than once" % subject,
            title="duplicate command",
            code=FaultCode.DUPLICATE_COMMAND,
            subject=subject,
            hint="give every command a unique name",
        )

    if (subject := _misspelled(names, COMMAND_PATTERN)) is not None:
        raise InvalidCommandNameError(
            "command name %r is not a lowercase kebab-case word" % subject,
            title="invalid command name",
            code=FaultCode.INVALID_COMMAND_NAME,
            subject=subject,
            hint="use lowercase letters with at most one hyphen (for example: build, install-apk)",
        )

    aliases = [alias for command in commands for alias in command.aliases]
    if (subject := _duplicate(aliases)) is not None:
        raise DuplicateCommandAliasError(
            "command alias %r is defined more than once" % subject,
            title="duplicate command alias",
            code=FaultCode.DUPLICATE_COMMAND_ALIAS,
            subject=subject,
            hint="keep command aliases unique across the whole schema",
        )

    if (subject := _misspelled(aliases, COMMAND_PATTERN)) is not None:
        raise InvalidCommandAliasError(
            "command alias %r is not a lowercase kebab-case word" % subject,
            title="invalid command alias",
            code=FaultCode.INVALID_COMMAND_ALIAS,
            subject=subject,
            hint="spell aliases like command names (for example: run-test)",
        )

    if (subject := _duplicate(names + aliases)) is not None:
        raise CommandAliasConflictError(
            "%r is used both as a command name and as a command alias" % subject,
            title="command alias conflict",
            code=FaultCode.COMMAND_ALIAS_CONFLICT,
            subject=subject,
            hint="rename the alias or the command so each string selects one command",
        )

    for command in commands:
        names = [option.name for option in command.options]
        context = {"command": command.command}

        if (subject := _duplicate(names)) is not None:
            raise DuplicateOptionError(
                "option %r is defined more than once in command %r" % (subject, command.command),
                title="duplicate option",
                code=FaultCode.DUPLICATE_OPTION,
                subject=subject,
                hint="give every option of a command a unique name",
                **context,
            )

        if (subject := _misspelled(names, OPTION_PATTERN)) is not None:
            raise InvalidOptionNameError(
                "option name %r in command %r is not camelCase" % (subject, command.command),
                title="invalid option name",
                code=FaultCode.INVALID_OPTION_NAME,
                subject=subject,
                hint="use camelCase letters (for example: rootPath) or a single lowercase letter",
                **context,
            )

        if (subject := next((name for name in names if name in RESERVED), None)) is not None:
            raise ReservedOptionError(
                "option name %r in command %r is reserved" % (subject, command.command),
                title="reserved option name",
                code=FaultCode.RESERVED_OPTION,
                subject=subject,
                hint="'command' and 'args' are result keys and get/items/keys/values are result methods; pick another name",
                **context,
            )

        aliases = [alias for option in command.options for alias in option.aliases]
        if (subject := _duplicate(aliases)) is not None:
            raise DuplicateOptionAliasError(
                "option alias %r is defined more than once in command %r" % (subject, command.command),
                title="duplicate option alias",
                code=FaultCode.DUPLICATE_OPTION_ALIAS,
                subject=subject,
                hint="keep option aliases unique within a command",
                **context,
            )

        if (subject := _misspelled(aliases, OPTION_PATTERN)) is not None:
            raise InvalidOptionAliasError(
                "option alias %r in command %r is not camelCase" % (subject, command.command),
                title="invalid option alias",
                code=FaultCode.INVALID_OPTION_ALIAS,
                subject=subject,
                hint="spell aliases like option names (for example: yourAge, v)",
                **context,
            )

        for option in command.options:
            if option.value.boolean:
                continue
            if (subject := next((key for key in option.keys if len(key) == 1), None)) is not None:
                raise ShortOptionError(
                    "one-character %s %r of option %r is only allowed on boolean options" % (
                        "name" if subject == option.name else "alias", subject, option.name
                    ),
                    title="short non-boolean option",
                    code=FaultCode.SHORT_OPTION,
                    subject=subject,
                    hint="use at least two characters, or make %r a boolean" % option.name,
                    **context,
                )


__all__ = (
    "validate_schema",
)

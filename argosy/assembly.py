"""
Union assembler: turn a Scan into a validated, typed result.

One closed pydantic shape is built per command when the Assembler is created:

    {"command": Literal["build"], "args": list[str], "rootPath": str, ...}

The global pseudo-command gets the same shape without "command". Shapes are
TypedDicts configured with extra="forbid", so an option that does not belong
to the selected command is reported instead of ignored. Selecting a shape is a
dict lookup on the command name.

assemble() returns a ParseResult or raises ArgumentsError carrying every
problem found (malformed tokens, unknown options, missing or invalid values,
bad positionals).
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal, NotRequired, TypedDict

from pydantic import ConfigDict, TypeAdapter, ValidationError, with_config

from .faults import ArgumentsError, FaultCode, Issue
from .specs import Command, NO_COMMAND
from .utils import Unset, flagify, ordinal
from .validate import RESERVED


class ParseResult(Mapping):
    """
    Read-only result of a successful parse.

    Behaves as a mapping ({"command": ..., "args": (...), <option>: value}) and
    exposes every key as an attribute. Options declared by the selected command
    but absent from argv read as None through attribute access; unknown names
    raise AttributeError. Option names never shadow the mapping methods (get,
    items, keys, values); the validator rejects them.

    >>> result.command, result.args, result.rootPath  # doctest: +SKIP
    ('build', (), './app')
    """

    __slots__ = ("_data", "_declared")

    def __init__(self, data, /, declared=()):
        object.__setattr__(self, "_data", MappingProxyType(dict(data)))
        object.__setattr__(self, "_declared", frozenset(declared))

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            pass
        if name in self._declared:
            return None
        raise AttributeError("parse result has no option %r" % name)

    def __setattr__(self, name, value):
        raise AttributeError("parse results are read-only")

    def __delattr__(self, name):
        raise AttributeError("parse results are read-only")

    def __repr__(self):
        return "ParseResult(%s)" % ", ".join("%s=%r" % item for item in self._data.items())

    def __rich_repr__(self):
        yield from self._data.items()


def _shape(command):
    """
    closed TypedDict for one command.
    """
    fields = {}
    if not command.pseudo:
        fields["command"] = Literal[command.command]
    fields["args"] = command.arguments.annotation
    for option in command.options:
        annotation = option.value.annotation
        if option.value.optional and option.value.default is Unset:
            annotation = NotRequired[annotation]
        fields[option.name] = annotation

    title = "".join(part.title() for part in command.command.split("-")) + "Shape"
    return with_config(ConfigDict(extra="forbid", title=title))(TypedDict(title, fields))


def _lower(message):
    return message[:1].lower() + message[1:]


class Assembler:
    """
    Validate scans against per-command closed shapes.

    parameters
    - commands: every Command of the schema. When no global pseudo-command is
      among them, an empty one (any strings, no options) is assumed.
    """

    def __init__(self, commands):
        commands = tuple(commands)
        if not any(command.pseudo for command in commands):
            commands = (Command(NO_COMMAND), *commands)

        self._commands = {}
        self._adapters = {}
        for command in commands:
            key = None if command.pseudo else command.command
            self._commands[key] = command
            self._adapters[key] = TypeAdapter(_shape(command))

    def assemble(self, scan, /):
        """
        Build the ParseResult for a scan, or raise ArgumentsError.
        """
        command = self._commands[scan.command]
        issues = [
            Issue(
                ("argv", token.index),
                "malformed token %r at %s position, expected -x, --name or --name=value"
                % (token.text, ordinal(token.index + 1)),
                FaultCode.MALFORMED_TOKEN,
            )
            for token in scan.malformed
        ]

        declared = {option.name: option for option in command.options}
        document = {"args": list(scan.args)}
        if scan.command is not None:
            document["command"] = scan.command

        for name, value in scan.options.items():
            if name in RESERVED:
                issues.append(Issue((name,), "unrecognized option %r" % flagify(name), FaultCode.UNRECOGNIZED_OPTION))
                continue
            option = declared.get(name)
            if option is not None and option.value.textual and (inline := scan.sources[name].inline) is not None:
                value = inline
            document[name] = value

        for option in command.options:
            if option.name not in document and option.value.default is not Unset:
                document[option.name] = option.value.default

        try:
            data = self._adapters[scan.command].validate_python(document)
        except ValidationError as error:
            issues.extend(self._translate(error, scan))

        if issues:
            raise ArgumentsError(issues)

        data = {"command": scan.command, "args": tuple(data.pop("args"))} | {
            name: value for name, value in data.items() if name != "command"
        }
        return ParseResult(data, declared)

    def _translate(self, error, scan):
        for detail in error.errors(include_url=False):
            location = tuple(detail["loc"])
            head = location[0] if location else None
            kind = detail["type"]

            if head == "args":
                if len(location) > 1:
                    position = location[1]
                    message = "%s positional argument %r: %s" % (
                        ordinal(position + 1), scan.args[position], _lower(detail["msg"])
                    )
                else:
                    message = "positional arguments: %s" % _lower(detail["msg"])
                yield Issue(location, message, FaultCode.INVALID_ARGUMENTS)
            elif kind == "extra_forbidden":
                yield Issue(location, "unrecognized option %r" % flagify(head), FaultCode.UNRECOGNIZED_OPTION)
            elif kind == "missing":
                yield Issue(location, "missing required option %r" % flagify(head), FaultCode.MISSING_OPTION)
            elif (source := scan.sources.get(head)) is not None and source.inline is None and detail.get("input") is True:
                yield Issue(
                    location,
                    "option %r expects a value (for example: %s=...)" % (flagify(head), flagify(head)),
                    FaultCode.INVALID_VALUE,
                )
            else:
                yield Issue(
                    location,
                    "invalid value for option %r: %s" % (flagify(head), _lower(detail["msg"])),
                    FaultCode.INVALID_VALUE,
                )


__all__ = (
    "ParseResult",
    "Assembler",
)

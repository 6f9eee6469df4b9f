"""
Argosy schema specifications and builders.

Overview
- Option: a named, typed, optionally aliased flag of a command
  (`--root-path="./app"`, `--verbose`, `-v`).
- Command: a command name, its aliases, its positional shape, and its options.
- ParseOptions: parse-wide settings (global options, positional shape when no
  command is given, help metadata, validation toggle, alias policy).
- command(...) / options(...): authoring builders. command() returns an existing
  Command unchanged, so schema modules can pass specs around freely.

Construction only checks the *types* of what it receives. Naming rules and
duplicates are the schema validator's job (see validate), which the embedding
application may disable in production.

Every spec is immutable once built: fields are published through read-only
properties and containers come back as tuples.

Quick example:
    >>> from argosy import command, Option, String, Boolean
    >>> build = command(
    ...     "build",
    ...     aliases=("assemble",),
    ...     description="Build the project.",
    ...     options=(
    ...         Option("rootPath", String(optional=True), aliases=("root",)),
    ...         Option("release", Boolean(optional=True), aliases=("r",)),
    ...     ),
    ... )
    >>> build.options[0].flags
    ('--root-path', '--root')
"""
from collections.abc import Iterable
from enum import StrEnum

from .utils import *
from .values import Arguments, SpecType, Value, sanitize_text

NO_COMMAND = "no-command"
"""
name of the pseudo-command that carries the global options.

it is never matched by an argv token; the global shape is selected when no
command token appears at all.
"""


class AliasPolicy(StrEnum):
    """
    how option aliases are looked up (see aliases.AliasResolver).
    """
    GLOBAL = "global"
    SCOPED = "scoped"


def _sanitize_aliases(cls, metadata, /):
    """
    Internal: validate the types of an alias collection and freeze it.

    Aliases must be an iterable (not a bare string) of strings. Order is kept;
    duplicates and spelling are checked later by the schema validator.
    """
    aliases = metadata["aliases"]
    if isinstance(aliases, str) or not isinstance(aliases, Iterable):
        raise TypeError(f"{cls.__typename__} 'aliases' must be an iterable of strings")
    aliases = tuple(aliases)
    if not all(isinstance(alias, str) for alias in aliases):
        raise TypeError(f"{cls.__typename__} aliases must be strings")
    metadata["aliases"] = aliases


class Option(metaclass=SpecType):
    """
    Named, typed option of a command.

    Parameters
    - name: str
      Canonical camelCase name; the flag is its kebab-case form
      ("rootPath" → --root-path, "v" → -v).
    - value: Value
      Tagged payload (String/Number/Boolean/Literal) with optionality and default.
    - aliases: Iterable[str]
      Alternate names, spelled like `name` ("root" → --root).
    - description / example: str
      Help text; optional.
    """

    __introspectable__ = (
        "name",
        "value",
        "aliases",
        "description",
        "example",
    )

    def __new__(cls, name, value, /, aliases=(), description=Unset, example=Unset):
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} 'name' must be a string")
        if not isinstance(value, Value):
            raise TypeError(f"{cls.__typename__} 'value' must be a value spec (String, Number, Boolean, Literal)")

        metadata = {
            "aliases": aliases,
            "description": description,
            "example": example,
        }
        _sanitize_aliases(cls, metadata)
        sanitize_text(cls, metadata, "description", "example")

        self = super().__new__(cls)
        self._name = name
        self._value = value
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def keys(self):
        """
        canonical name followed by every alias.
        """
        return (self.name, *self.aliases)

    @property
    def flags(self):
        """
        the name and aliases as typed on the command line.
        """
        return tuple(map(flagify, self.keys))


class Command(metaclass=SpecType):
    """
    A command and the shape of everything that may follow it.

    Parameters
    - command: str
      Unique kebab-case name ("build", "install-apk").
    - aliases: Iterable[str]
      Alternate names; unique across every command name and alias.
    - description / example: str
      Help text; optional.
    - arguments: Arguments
      Positional shape; defaults to any number of strings.
    - options: Iterable[Option]
      Ordered options; when given it must hold at least one option.
    """

    __introspectable__ = (
        "command",
        "aliases",
        "description",
        "example",
        "arguments",
        "options",
    )

    def __new__(
            cls,
            command,
            /,
            aliases=(),
            description=Unset,
            example=Unset,
            arguments=Unset,
            options=Unset,
    ):
        if not isinstance(command, str):
            raise TypeError(f"{cls.__typename__} name must be a string")

        metadata = {
            "aliases": aliases,
            "description": description,
            "example": example,
        }
        _sanitize_aliases(cls, metadata)
        sanitize_text(cls, metadata, "description", "example")

        if not isinstance(arguments := coalesce(arguments, Arguments()), Arguments):
            raise TypeError(f"{cls.__typename__} 'arguments' must be an arguments spec")

        if options is Unset:
            options = ()
        elif isinstance(options, Iterable):
            if not (options := tuple(options)):
                raise ValueError(f"{cls.__typename__} 'options' cannot be empty, omit it instead")
            if not all(isinstance(option, Option) for option in options):
                raise TypeError(f"{cls.__typename__} options must be option specs")
        else:
            raise TypeError(f"{cls.__typename__} 'options' must be an iterable of options")

        self = super().__new__(cls)
        self._command = command
        self._arguments = arguments
        self._options = options
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def names(self):
        """
        command name followed by every alias.
        """
        return (self.command, *self.aliases)

    @property
    def pseudo(self):
        """
        whether this is the global pseudo-command.
        """
        return self.command == NO_COMMAND


class ParseOptions(metaclass=SpecType):
    """
    Parse-wide settings.

    Parameters
    - global_options: Iterable[Option]
      Options accepted when no command is given (e.g. --help, --version).
    - arguments: Arguments
      Positional shape when no command is given.
    - name / description / usage: str
      CLI name, description, and usage line for the help tree. The name falls
      back to __prog__ in __main__, then to the running script name.
    - validate: bool
      Run the schema validator before parsing. Defaults to __debug__, so it is
      on in development and off under `python -O`.
    - policy: AliasPolicy
      Option alias lookup policy, SCOPED by default.
    """

    __introspectable__ = (
        "global_options",
        "arguments",
        "name",
        "description",
        "usage",
        "validate",
        "policy",
    )

    def __new__(
            cls,
            global_options=(),
            arguments=Unset,
            name=Unset,
            description=Unset,
            usage=Unset,
            validate=Unset,
            policy=AliasPolicy.SCOPED,
    ):
        metadata = {
            "name": name,
            "description": description,
            "usage": usage,
        }
        sanitize_text(cls, metadata, "name", "description", "usage")

        if isinstance(global_options, str) or not isinstance(global_options, Iterable):
            raise TypeError(f"{cls.__typename__} 'global_options' must be an iterable of options")
        global_options = tuple(global_options)
        if not all(isinstance(option, Option) for option in global_options):
            raise TypeError(f"{cls.__typename__} global options must be option specs")

        if not isinstance(arguments := coalesce(arguments, Arguments()), Arguments):
            raise TypeError(f"{cls.__typename__} 'arguments' must be an arguments spec")

        try:
            policy = AliasPolicy(policy)
        except ValueError:
            raise ValueError(f"{cls.__typename__} 'policy' must be 'global' or 'scoped'") from None

        self = super().__new__(cls)
        self._global_options = global_options
        self._arguments = arguments
        self._validate = bool(coalesce(validate, __debug__))
        self._policy = policy
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def root(self):
        """
        the global pseudo-command built from these settings.
        """
        return Command(NO_COMMAND, arguments=self.arguments, options=self.global_options or Unset)


def command(source, /, *args, **kwargs):
    """
    Build a Command, or hand back an existing one unchanged.

    Usage
    - command("build", aliases=("assemble",), options=(...))
    - command(existing)  → existing (pass-through; extra arguments are rejected)
    """
    if isinstance(source, Command):
        if args or kwargs:
            raise TypeError("command() takes no extra arguments when given a command")
        return source
    return Command(source, *args, **kwargs)


def options(**kwargs):
    """
    Build the ParseOptions for parse()/Parser (see ParseOptions for the fields).
    """
    return ParseOptions(**kwargs)


__all__ = (
    "NO_COMMAND",
    "AliasPolicy",
    "Option",
    "Command",
    "ParseOptions",
    "command",
    "options",
)

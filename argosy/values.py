r"""
Argosy value model: what an option or the positional list may carry.

Overview
- ValueKind: explicit tag for an option's payload (string, number, boolean, literal).
  The tag travels on the spec, so nothing downstream has to probe a validator with
  sample inputs to guess its type.
- Value: a tagged payload description plus optionality and default.
  • String(...), Number(...), Boolean(...), Literal(value, ...) are the factories.
- Arguments: the shape of the positional sequence (element kind and length bounds).

Each Value/Arguments exposes `annotation`, the pydantic type the assembler uses to
validate and coerce parsed input, so the whole coercion policy lives here:
- STRING  → strict str (no implicit conversions)
- NUMBER  → int or float, parsed from "[-+]?(\d*\.)?\d+" text; bare flags (True) rejected
- BOOLEAN → bool (pydantic lax booleans: True/False, "yes"/"no", "on"/"off", 1/0, ...)
- LITERAL → exactly the literal value

Quick example:
    >>> from argosy.values import String, Number, Boolean, Literal, Arguments
    >>> String(optional=True)
    value(kind=<ValueKind.STRING: 'string'>, literal=None, optional=True, default=Unset)
    >>> Number(default=1).required
    False
    >>> Arguments(maximum=1).annotation  # doctest: +SKIP
"""
import functools
import math
import operator
import re
import typing
from enum import StrEnum
from typing import Annotated

from pydantic import Field, PlainValidator, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from .utils import *

NUMBER = re.compile(r"[-+]?(\d*\.)?\d+")


class ValueKind(StrEnum):
    """
    tag of an option payload.

    the string values double as the type labels shown in help syntax
    (e.g. --count=number, --name="string").
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LITERAL = "literal"


def coerce_number(text, /):
    """
    Parse numeric command-line text into an int or a float.

    Returns None when the text is not a plain decimal number. Text without a
    fractional part becomes an int ("42" → 42, "+7" → 7), otherwise a float
    (".5" → 0.5, "-3.25" → -3.25). Exponents and "3." are not numbers here, and
    neither are digit runs longer than the interpreter converts to int.
    """
    if not NUMBER.fullmatch(text):
        return None
    try:
        return float(text) if "." in text else int(text)
    except ValueError:
        return None


def _validate_number(value):
    if isinstance(value, str):
        value = coerce_number(value)
    # bool is an int subclass; a bare "--count" must not read as 1
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        raise PydanticCustomError("number_type", "input should be a number")
    return value


Numeric = Annotated[int | float, PlainValidator(_validate_number)]


class SpecType(type):
    """
    Metaclass shared by every schema spec (values, arguments, options, commands).

    Responsibilities
    - Expose each name listed in __introspectable__ as a read-only property
      backed by "_{name}" (see mirror()).
    - Provide stable, readable __repr__/__rich_repr__ for diagnostics.
    - Derive __typename__ from the class name (camel-case split with hyphens),
      used as the subject of construction errors ("option 'name' ...").
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - option(name='rootPath', value=value(...), aliases=('root',), ...)
            """
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__())),
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers (e.g., rich).
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def sanitize_text(cls, metadata, /, *fields):
    """
    Internal: normalize optional human-readable text fields in place.

    Each field must be Unset or a string non-empty after trimming. Unset becomes
    None; provided strings are stored trimmed.

    Raises
    - TypeError: when a field is neither a string nor Unset.
    - ValueError: when a field is a string but empty after trimming.
    """
    for field in fields:
        if not isinstance(value := metadata[field], str | Unset):
            raise TypeError(f"{cls.__typename__} {field!r} must be a string")
        elif isinstance(value, str) and not (value := value.strip()):
            raise ValueError(f"{cls.__typename__} {field!r} cannot be empty")
        metadata[field] = coalesce(value)


class Value(metaclass=SpecType):
    """
    Tagged payload description of an option.

    Properties
    - kind: ValueKind
    - literal: the literal value (LITERAL only; None otherwise)
    - optional: bool, the option may be omitted
    - default: value used when omitted (Unset when there is none)
    - required: neither optional nor defaulted
    - annotation: pydantic type used by the assembler
    """

    __introspectable__ = (
        "kind",
        "literal",
        "optional",
        "default",
    )

    def __new__(cls, kind, /, literal=Unset, *, optional=False, default=Unset):
        try:
            kind = ValueKind(kind)
        except ValueError:
            raise ValueError(f"{cls.__typename__} 'kind' must be one of {', '.join(map(repr, ValueKind))}") from None

        if kind is ValueKind.LITERAL:
            if literal is Unset:
                raise TypeError(f"literal {cls.__typename__} must specify its 'literal'")
            if isinstance(literal, bool) or not isinstance(literal, str | int | float):
                raise TypeError(f"{cls.__typename__} 'literal' must be a string or a number")
        elif literal is not Unset:
            raise TypeError(f"{kind} {cls.__typename__} cannot specify a 'literal'")

        self = super().__new__(cls)
        self._kind = kind
        self._literal = coalesce(literal)
        self._optional = bool(optional)
        self._default = Unset

        if default is not Unset:
            # defaults go through the same coercion as user input
            try:
                self._default = TypeAdapter(self.annotation).validate_python(default)
            except ValidationError:
                raise ValueError(f"{cls.__typename__} 'default' {default!r} is not a valid {kind}") from None

        return self

    @property
    def required(self):
        return not self.optional and self.default is Unset

    @property
    def boolean(self):
        return self.kind is ValueKind.BOOLEAN

    @property
    def annotation(self):
        match self.kind:
            case ValueKind.STRING:
                return StrictStr
            case ValueKind.NUMBER:
                return Numeric
            case ValueKind.BOOLEAN:
                return bool
            case ValueKind.LITERAL:
                return typing.Literal[self.literal]

    @property
    def textual(self):
        """
        Whether the value is compared as text (strings and string literals).

        Textual values receive the verbatim text after '=', so "--name=42"
        stays "42" rather than the number the tokenizer classified.
        """
        return self.kind is ValueKind.STRING or (self.kind is ValueKind.LITERAL and isinstance(self.literal, str))


def String(*, optional=False, default=Unset):
    return Value(ValueKind.STRING, optional=optional, default=default)


def Number(*, optional=False, default=Unset):
    return Value(ValueKind.NUMBER, optional=optional, default=default)


def Boolean(*, optional=False, default=Unset):
    return Value(ValueKind.BOOLEAN, optional=optional, default=default)


def Literal(literal, /, *, optional=False, default=Unset):
    return Value(ValueKind.LITERAL, literal, optional=optional, default=default)


class Arguments(metaclass=SpecType):
    """
    Shape of the positional-argument sequence.

    - kind: STRING (default) or NUMBER; numbers are coerced from their text.
    - minimum / maximum: inclusive bounds on the count (maximum None = unbounded).
    - description: shown in help next to the command.
    """

    __introspectable__ = (
        "kind",
        "minimum",
        "maximum",
        "description",
    )

    def __new__(cls, kind=ValueKind.STRING, /, minimum=0, maximum=Unset, description=Unset):
        metadata = {"description": description}
        sanitize_text(cls, metadata, "description")

        try:
            kind = ValueKind(kind)
        except ValueError:
            raise ValueError(f"{cls.__typename__} 'kind' must be a value kind") from None
        if kind not in (ValueKind.STRING, ValueKind.NUMBER):
            raise ValueError(f"{cls.__typename__} 'kind' must be string or number")

        if isinstance(minimum, bool) or not isinstance(minimum, int):
            raise TypeError(f"{cls.__typename__} 'minimum' must be an integer")
        if minimum < 0:
            raise ValueError(f"{cls.__typename__} 'minimum' cannot be negative")
        if maximum is not Unset:
            if isinstance(maximum, bool) or not isinstance(maximum, int):
                raise TypeError(f"{cls.__typename__} 'maximum' must be an integer")
            if maximum < minimum:
                raise ValueError(f"{cls.__typename__} 'maximum' cannot be lower than 'minimum'")

        self = super().__new__(cls)
        self._kind = kind
        self._minimum = minimum
        self._maximum = coalesce(maximum)
        self._description = metadata["description"]
        return self

    @property
    def annotation(self):
        item = Numeric if self.kind is ValueKind.NUMBER else StrictStr
        return Annotated[list[item], Field(min_length=self.minimum, max_length=self.maximum)]


__all__ = (
    "ValueKind",
    "Value",
    "String",
    "Number",
    "Boolean",
    "Literal",
    "Arguments",
    "coerce_number",
)

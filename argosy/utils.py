"""
Argosy utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the schema, tokenizer, and help layers.
- Public-but-internal leaning: stable enough for consumers, designed primarily
  to support the higher-level specs/engine layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/False.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated accessors for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr) as an
    immutable view (tuple / frozenset / MappingProxyType).

- camelize(key) / flagify(name)
  • Convert between the command-line spelling of an option (--root-path) and its
    schema spelling (rootPath).

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(False, "fallback")
    False
    >>> camelize("root-path")
    'rootPath'
    >>> flagify("rootPath"), flagify("v")
    ('--root-path', '-v')
"""
import builtins
import functools
import re
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    This is used when None is a legitimate user value, but the API needs a way
    to distinguish “not provided” from “provided as None”. A single instance,
    Unset, is exposed for use as the default in internal parameters.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when UnsetType appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        """
        Ensure a single instance for this sentinel type.
        """
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        """
        Disallow subclassing to preserve sentinel semantics.
        """
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Returns the given object unless it is Unset, in which case the provided
    default is returned. Falsey values like None, 0, "", or False are preserved
    as-is; they are not treated as “unset”.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable   (renames in place)
    - rename(name) -> decorator            (renames a future callable)

    Raises TypeError on a non-callable target, a non-string name, or a callable
    whose name attributes cannot be updated (built-ins).
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Return a read-only view of a container; other values pass through.

    - Sequence (non-string) → tuple
    - Mapping              → MappingProxyType
    - Set                  → frozenset
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    elif isinstance(object, Mapping):
        return MappingProxyType(object)
    elif isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" on the instance and returns a
    read-only view for container types, so spec state published through the
    public API cannot be mutated by callers.

    Example
    - Given self._aliases, declare aliases = mirror("aliases").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


@functools.cache
def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth") for nicer phrasing in messages.
    - Other numbers use numeric ordinals with correct English suffixes.
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, 113th, ...)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


@functools.cache
def camelize(key, /):
    """
    Convert a kebab-case option key into its camelCase schema name.

    Every "-x" pair collapses into "X", mirroring how flags are written on the
    command line: "root-path" → "rootPath", "dry-run-now" → "dryRunNow".
    """
    if not isinstance(key, str):
        raise TypeError("camelize() argument must be a string")
    return re.sub(r"-(\w)", lambda match: match[1].upper(), key)


@functools.cache
def flagify(name, /):
    """
    Render a schema name as the flag a user types.

    - one character → "-x"
    - otherwise     → "--" + kebab-case ("rootPath" → "--root-path")
    """
    if not isinstance(name, str):
        raise TypeError("flagify() argument must be a string")
    if len(name) == 1:
        return "-" + name
    return "--" + re.sub(r"[A-Z]", lambda match: "-" + match[0].lower(), name)


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "mirror",
    "camelize",
    "flagify",
    "ordinal",
)

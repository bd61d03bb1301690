"""
argscan utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the token, entry and argument-list layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated methods for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr).

- RecordType
  • Metaclass for the immutable records (tokens, entries): read-only fields,
    structural equality, hashing and stable repr/__rich_repr__.

- parse_bool(text)
  • Recognize the boolean literals a bool flag may carry as an inline value.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> parse_bool("TRUE")
    True
"""
import builtins
import functools
import operator
import re
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

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

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
    - rename(callable, name) -> callable (renamed in place)
    - rename(name)           -> decorator

    Raises
    - TypeError when the callable is not callable/updatable or the name is not a string.
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


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads from an attribute named "_{name}" on the
    instance. Mappings are handed out as read-only views.

    Parameters
    - name: str
      The public property name and the suffix of the backing field "_{name}".

    Returns
    - property object bound to a getter that reads self._{name}.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        object = getattr(self, "_" + name)
        if isinstance(object, dict):
            return MappingProxyType(object)
        return object

    return property(getter)


class RecordType(type):
    """
    Metaclass that turns plain classes into small immutable records.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      backed by "_{name}" (see mirror()).
    - Provide structural __eq__/__hash__: two records are equal when they have
      the same type and equal introspectable fields.
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in reprs, e.g. "flag-token(arg='-v', ...)".
    - Subclasses list their complete field set in __introspectable__; fields are
      not merged from base classes.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                field: mirror(field) for field in namespace.get("__introspectable__", ())
            },
        )

        if "__eq__" not in namespace:
            @rename("__eq__")
            def __eq__(self, other):
                if type(self) is not type(other):
                    return NotImplemented
                return all(getattr(self, field) == getattr(other, field) for field in type(self).__introspectable__)
            self.__eq__ = __eq__

        if "__hash__" not in namespace:
            @rename("__hash__")
            def __hash__(self):
                return hash((type(self), *(getattr(self, field) for field in type(self).__introspectable__)))
            self.__hash__ = __hash__

        @rename("__repr__")
        def __repr__(self):
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            )
        if "__repr__" not in namespace:
            self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for field in type(self).__introspectable__:
                yield field, getattr(self, field)
        if "__rich_repr__" not in namespace:
            self.__rich_repr__ = __rich_repr__

        return self


# boolean literal spellings accepted as inline values of bool flags
_BOOLEANS = MappingProxyType({
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
})


def parse_bool(text, /):
    """
    Return the boolean spelled by `text`, or None when it is not a boolean literal.

    Accepted spellings: 1 t T TRUE true True / 0 f F FALSE false False.
    """
    if not isinstance(text, str):
        raise TypeError("parse_bool() argument must be a string")
    return _BOOLEANS.get(text)


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "parse_bool",

    # Types
    "UnsetType",
    "RecordType",

    # Constants
    "Unset",
)

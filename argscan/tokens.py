"""
argscan tokens: lexical classification of raw arguments.

Overview
- classify(arg): pure, stateless classification of one raw argument into a
  Classification (flag? terminator? name, inline value, dash count).
- Token model: one record type per base role, each carrying only the facts that
  apply to it.
  • FlagToken: a flag name, optionally with an inline value; modifiers bool,
    known and double_dashed (inline is derived from the value).
  • FlagValueToken: the separate value consumed by the preceding flag; modifier known.
  • UnnamedToken: a positional argument.
  • TerminatorToken: the literal "--" that ends flag scanning.
- Role: the base role of a token, also available as `token.role`.

Classification rules
- strings shorter than 2 characters or not starting with '-' are never flags.
- exactly '--' is the terminator.
- the remainder after one or two dashes is split on the first '=':
  • '=' at position zero ('-=x') is not a flag (left for the downstream binder to reject).
  • '=' elsewhere splits into name and inline value (the value may be empty).
  • no '=' means the whole remainder is the name and there is no inline value.

Quick example
    >>> classify("--output=out.txt")
    Classification(flag=True, terminator=False, name='output', value='out.txt', double_dashed=True)
    >>> classify("-=x").flag
    False
"""
from collections import namedtuple
from enum import IntEnum

from .utils import RecordType

Classification = namedtuple("Classification", (
    "flag",
    "terminator",
    "name",
    "value",
    "double_dashed",
))

_POSITIONAL = Classification(False, False, None, None, False)
_TERMINATOR = Classification(False, True, None, None, True)


def classify(arg, /):
    """
    Classify a single raw argument without any knowledge of registered flags.

    Parameters
    - arg: str
      one element of the argument vector.

    Returns
    - Classification(flag, terminator, name, value, double_dashed)
      • value is None when no '=' is present, otherwise the (possibly empty) text after it.

    Raises
    - TypeError when arg is not a string.
    """
    if not isinstance(arg, str):
        raise TypeError("classify() argument must be a string")
    if len(arg) < 2 or arg[0] != "-":
        return _POSITIONAL

    start = 1
    if arg[1] == "-":
        if len(arg) == 2:
            return _TERMINATOR
        start = 2

    name, equals, value = arg[start:].partition("=")
    if equals and not name:
        # bad flag syntax: not ours to reject
        return _POSITIONAL
    return Classification(True, False, name, value if equals else None, start == 2)


class Role(IntEnum):
    """
    base role of a token; exactly one per token.
    """
    FLAG = 1
    FLAG_VALUE = 2
    UNNAMED = 3
    TERMINATOR = 4


class Token(metaclass=RecordType):
    """
    base class of the token records; use the concrete subclasses.
    """
    role = None

    def __init__(self, arg, /):
        if not isinstance(arg, str):
            raise TypeError(f"{type(self).__typename__} 'arg' must be a string")
        self._arg = arg


class FlagToken(Token):
    """
    a flag name, as in '-v', '--name' or '--name=value'.

    fields
    - arg: the raw argument.
    - name: the bare flag name (no dashes, no inline value).
    - value: the inline value, or None when the argument has no '='.
    - bool: the flag is complete on its own (registered as bool, or an unknown
      flag at the end of the flags).
    - known: the name is present in the registry.
    - double_dashed: written with two leading dashes.

    derived
    - inline: an inline value is present.
    - ambiguous: unknown, without inline value and not resolved as bool; the
      consumer decides whether it takes the next argument as its value.
    """
    __introspectable__ = ("arg", "name", "value", "bool", "known", "double_dashed")
    role = Role.FLAG

    def __init__(self, arg, name, value=None, /, *, bool=False, known=False, double_dashed=False):
        super().__init__(arg)
        self._name = name
        self._value = value
        self._bool = bool
        self._known = known
        self._double_dashed = double_dashed

    @property
    def inline(self):
        return self._value is not None

    @property
    def ambiguous(self):
        return not self._known and not self._bool and self._value is None

    def as_bool(self):
        """
        return a copy of this token resolved as a bool flag.
        """
        return FlagToken(
            self._arg,
            self._name,
            self._value,
            bool=True,
            known=self._known,
            double_dashed=self._double_dashed,
        )


class FlagValueToken(Token):
    """
    the separate value of the preceding flag token, taken verbatim.

    fields
    - arg: the raw argument (also available as `value`).
    - known: the owning flag is registered.
    """
    __introspectable__ = ("arg", "known")
    role = Role.FLAG_VALUE

    def __init__(self, arg, /, *, known=False):
        super().__init__(arg)
        self._known = known

    @property
    def value(self):
        return self._arg


class UnnamedToken(Token):
    """a positional argument."""
    __introspectable__ = ("arg",)
    role = Role.UNNAMED


class TerminatorToken(Token):
    """the '--' argument ending flag scanning."""
    __introspectable__ = ("arg",)
    role = Role.TERMINATOR

    def __init__(self, arg="--", /):
        super().__init__(arg)


__all__ = (
    "Classification",
    "classify",
    "Role",
    "Token",
    "FlagToken",
    "FlagValueToken",
    "UnnamedToken",
    "TerminatorToken",
)

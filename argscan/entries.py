"""
argscan entries: reconstructable units assembled from tokens.

Entry kinds
- FlagEntry: a flag together with its value, if any.
  • bool flag:            '-v'           / '--verbose'
  • bool, inline value:   '-v=false'     / '--verbose=false'
  • separate value:       '-o out.txt'   / '--output out.txt'
  • inline value:         '-o=out.txt'   / '--output=out.txt'
  A non-bool flag without a value renders with an empty separate value
  ('-o', ''), so the output re-enters the pipeline unchanged. Only the
  assembler produces bare non-bool flags: a flag whose value is missing at
  the end of the input keeps its original bare rendering.
- TerminatorEntry: the '--' argument (TERMINATOR is the only instance).
- UnnamedArgsEntry: a run of positional arguments, kept verbatim.

Every entry re-serializes to raw arguments through tokens(); for an entry taken
unchanged from a traversal this reproduces the original text exactly.

FlagEntry values are immutable: the with_*() helpers return edited copies that
keep the canonical rendering consistent (for example, a bool flag given a
non-boolean inline value stops being a bool flag).

assemble(tokens) folds a token stream (argscan.scanner.resolve) into entries.
"""
import builtins
from enum import IntEnum

from .tokens import *
from .utils import RecordType, parse_bool


class EntryKind(IntEnum):
    FLAG = 0
    TERMINATOR = 1
    UNNAMED_ARGS = 2


class Entry(metaclass=RecordType):
    """
    base class of the entries.

    interface
    - kind: EntryKind of the entry.
    - tokens(): canonical raw arguments, as a list of strings.
    - count: number of raw arguments the entry renders to.
    - str(entry): the raw arguments joined by a single space.
    """
    kind = None

    def tokens(self):
        raise NotImplementedError

    @property
    def count(self):
        return len(self.tokens())

    def __str__(self):
        return " ".join(self.tokens())


class FlagEntry(Entry):
    """
    a flag and its value.

    fields
    - name: bare flag name.
    - value: the value (inline or separate), or None for a bare flag.
    - inline: the value is attached with '='.
    - double_dashed: rendered with two leading dashes.
    - bool: the flag does not take a separate value.

    construction
    - FlagEntry("o", "out.txt")          -> '-o out.txt'
    - FlagEntry.boolean("v")             -> '-v'
    - FlagEntry.boolean("v", "false")    -> '-v=false'
    """
    __introspectable__ = ("name", "value", "inline", "double_dashed", "bool")
    kind = EntryKind.FLAG

    def __init__(self, name, value=None, /, *, inline=False, double_dashed=False, bool=False):
        if not isinstance(name, str):
            raise TypeError("flag entry 'name' must be a string")
        if not name:
            raise ValueError("flag entry 'name' cannot be empty")
        if not isinstance(value, str | None):
            raise TypeError("flag entry 'value' must be a string or None")
        self._name = name
        self._value = value
        self._inline = builtins.bool(inline)
        self._double_dashed = builtins.bool(double_dashed)
        self._bool = builtins.bool(bool)

    @classmethod
    def boolean(cls, name, value=None, /):
        """
        build a bool flag entry; a non-empty value is rendered inline.
        """
        return cls(name, value or None, inline=bool(value), bool=True)

    # set by assemble() on a flag whose value was missing at the end of the input
    _bare = False

    @classmethod
    def _truncated(cls, name, /, *, double_dashed=False):
        entry = cls(name, double_dashed=double_dashed)
        entry._bare = True
        return entry

    def _replace(self, **changes):
        fields = {field: getattr(self, field) for field in type(self).__introspectable__} | changes
        entry = FlagEntry(fields.pop("name"), fields.pop("value"), **fields)
        if self._bare and entry._value is None:
            entry._bare = True
        return entry

    def tokens(self):
        name = ("--" if self._double_dashed else "-") + self._name
        if self._inline:
            return [name + "=" + (self._value or "")]
        if self._bool or self._bare:
            return [name]
        return [name, self._value or ""]

    def with_name(self, name, /):
        return self._replace(name=name)

    def with_value(self, value, /):
        """
        replace the value.

        for a bool flag the value becomes inline, or disappears when empty; a
        value that is not a boolean literal turns the flag into a non-bool flag.
        """
        if value == self._value:
            return self
        if not self._bool:
            return self._replace(value=value)
        if not value:
            return self._replace(value=None, inline=False)
        return self._replace(value=value, inline=True, bool=parse_bool(value) is not None)

    def with_no_value(self):
        """
        make this a bare bool flag (implicitly true).
        """
        return self._replace(value=None, inline=False, bool=True)

    def with_inline(self, inline, /):
        """
        attach the value with '=' or move it to a separate argument.

        - bool flag without value, made inline: the implicit 'true' becomes explicit.
        - any flag made non-inline becomes a non-bool flag with a separate value
          (an empty one when the flag had none).
        """
        if inline == self._inline:
            return self
        if inline:
            if self._bool and self._value is None:
                return self._replace(value="true", inline=True)
            return self._replace(inline=True)
        return self._replace(value=self._value or "", inline=False, bool=False)

    def with_double_dashes(self, double_dashed, /):
        return self._replace(double_dashed=double_dashed)


class TerminatorEntry(Entry):
    """the '--' argument; TERMINATOR is the only instance."""
    kind = EntryKind.TERMINATOR

    def __new__(cls):
        try:
            return TERMINATOR
        except NameError:
            return super().__new__(cls)

    def tokens(self):
        return ["--"]

    def __repr__(self):
        return "TERMINATOR"


TERMINATOR = TerminatorEntry()


class UnnamedArgsEntry(Entry):
    """
    a run of positional arguments; behaves as a read-only sequence of strings.
    """
    __introspectable__ = ("args",)
    kind = EntryKind.UNNAMED_ARGS

    def __init__(self, args=(), /):
        self._args = tuple(args)
        if not all(isinstance(arg, str) for arg in self._args):
            raise TypeError("unnamed args entry must hold strings only")

    def tokens(self):
        return list(self._args)

    def __iter__(self):
        return iter(self._args)

    def __len__(self):
        return len(self._args)

    def __getitem__(self, index):
        return self._args[index]


def assemble(tokens, /):
    """
    Fold a token stream into entries, preserving the input order.

    Rules
    - consecutive unnamed tokens grow one UnnamedArgsEntry, flushed when another
      kind of token appears or the stream ends.
    - a bool or inline flag token is an entry on its own.
    - any other flag token is paired with the following flag value token.
    - a flag followed by something other than a value was left complete by the
      consumer (plain iteration of scan() never asks for values): it becomes a
      bool FlagEntry.
    - a flag still waiting for its value when the stream ends is flushed as a
      valueless FlagEntry that keeps its bare rendering, so the rendering still
      matches the input.
    - the terminator token becomes TERMINATOR.
    """
    unnamed = []
    pending = None

    for token in tokens:
        if pending is not None and not isinstance(token, FlagValueToken):
            yield FlagEntry(pending.name, double_dashed=pending.double_dashed, bool=True)
            pending = None
        if unnamed and not isinstance(token, UnnamedToken):
            yield UnnamedArgsEntry(unnamed)
            unnamed = []

        match token:
            case FlagToken(bool=False, inline=False):
                pending = token
            case FlagToken():
                yield FlagEntry(
                    token.name,
                    token.value,
                    inline=token.inline,
                    double_dashed=token.double_dashed,
                    bool=token.bool,
                )
            case FlagValueToken():
                yield FlagEntry(pending.name, token.value, double_dashed=pending.double_dashed)
                pending = None
            case TerminatorToken():
                yield TERMINATOR
            case _:
                unnamed.append(token.arg)

    if pending is not None:
        yield FlagEntry._truncated(pending.name, double_dashed=pending.double_dashed)
    if unnamed:
        yield UnnamedArgsEntry(unnamed)


__all__ = (
    "EntryKind",
    "Entry",
    "FlagEntry",
    "TerminatorEntry",
    "TERMINATOR",
    "UnnamedArgsEntry",
    "assemble",
)

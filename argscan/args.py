"""
argscan argument lists: traversal and copy-on-write editing of argument vectors.

Args bundles three immutable parts
- args: the raw argument vector (tuple of strings, program name excluded).
- known_flags: the registry of flag name -> "is bool" (read-only mapping).
- ambiguous_as_bool: policy for unknown flags that could either be bool flags
  or wait for a value (False: they take the next argument as their value).

Traversals (lazy, one-shot, recomputed on every call)
- scan():            raw token generator with the send protocol (argscan.scanner.scan).
- walk(callback):    raw tokens, decided per token by callback.
- tokens():          tokens with the ambiguous policy applied.
- entries():         entries assembled from tokens().

Edits (always return new Args; the original, including its registry, is untouched)
- map_entries(mapper) / map_flags(mapper): generic transformer.
- lookup_flag(name), delete_flag(name), upsert_flag(insert, update).
- strip_unknown_flags(ignored): split into known and unknown parts.
- with_known_flags(...), without_known_flags(...), with_parser(...),
  with_ambiguous_as_bool(...).

Registry sharing
- a registry is shared by reference until an edit needs to change it; that
  edit works on a fresh copy (copy-on-write), so holders of the previous Args
  never observe the change.

Quick example
    >>> args = Args(["-s", "abc"], {"s": False})
    >>> result = args.upsert_flag(FlagEntry("x", "4"), lambda old: old)
    >>> result.args
    ('-x', '4', '-s', 'abc')
    >>> result.lookup_flag("x")
    flag-entry(name='x', value='4', inline=False, double_dashed=False, bool=False)
"""
from collections.abc import Iterable

from . import registry
from .entries import *
from .scanner import *
from .utils import Unset, coalesce


def _sanitized(iterable):
    if isinstance(iterable, str) or not isinstance(iterable, Iterable):
        raise TypeError("Args() argument must be an iterable of strings")
    for item in iterable:
        if not isinstance(item, str):
            raise TypeError("Args() argument must be an iterable of strings")
        yield item


class Args:
    """
    An immutable argument vector together with its known-flags registry.

    Parameters
    - args: Iterable[str]
      raw arguments (each element is kept verbatim).
    - known_flags: Mapping[str, bool] | None
      registry of known flag names; True marks a bool flag.
    - ambiguous_as_bool: bool (keyword-only)
      treat ambiguous unknown flags as bool flags instead of value-taking ones.

    Raises
    - TypeError for non-string arguments or a malformed registry.
    """
    __slots__ = ("_args", "_known_flags", "_ambiguous_as_bool")

    def __init__(self, args=(), /, known_flags=None, *, ambiguous_as_bool=False):
        self._args = tuple(_sanitized(args))
        self._known_flags = registry.freeze(known_flags)
        self._ambiguous_as_bool = bool(ambiguous_as_bool)

    def _evolve(self, args=Unset, known_flags=Unset, ambiguous_as_bool=Unset):
        # internal constructor: parts are already validated
        clone = object.__new__(Args)
        clone._args = tuple(coalesce(args, self._args))
        clone._known_flags = coalesce(known_flags, self._known_flags)
        clone._ambiguous_as_bool = coalesce(ambiguous_as_bool, self._ambiguous_as_bool)
        return clone

    @property
    def args(self):
        return self._args

    @property
    def known_flags(self):
        return self._known_flags

    @property
    def ambiguous_as_bool(self):
        return self._ambiguous_as_bool

    def __iter__(self):
        return iter(self._args)

    def __len__(self):
        return len(self._args)

    def __eq__(self, other):
        if not isinstance(other, Args):
            return NotImplemented
        return (
            self._args == other._args
            and self._known_flags == other._known_flags
            and self._ambiguous_as_bool == other._ambiguous_as_bool
        )

    def __hash__(self):
        return hash((self._args, frozenset(self._known_flags.items()), self._ambiguous_as_bool))

    def __repr__(self):
        return "args(%r, known_flags=%r, ambiguous_as_bool=%r)" % (
            list(self._args), dict(self._known_flags), self._ambiguous_as_bool
        )

    def __rich_repr__(self):
        yield "args", self._args
        yield "known_flags", dict(self._known_flags)
        yield "ambiguous_as_bool", self._ambiguous_as_bool

    # --- configuration ----------------------------------------------------

    def with_ambiguous_as_bool(self, ambiguous_as_bool, /):
        return self._evolve(ambiguous_as_bool=bool(ambiguous_as_bool))

    def with_known_flags(self, known_flags, /):
        """
        return a copy whose registry also contains `known_flags` (they win on conflicts).
        """
        return self._evolve(known_flags=registry.merge(self._known_flags, known_flags))

    def without_known_flags(self, names, /):
        """
        return a copy whose registry no longer contains `names`.
        """
        return self._evolve(known_flags=registry.remove(self._known_flags, names))

    def with_parser(self, *parsers):
        """
        return a copy whose registry also contains the options of the given
        argparse parsers (see argscan.registry.from_parser).
        """
        return self._evolve(known_flags=registry.merge(
            self._known_flags,
            *map(registry.from_parser, parsers),
        ))

    # --- traversals -------------------------------------------------------

    def scan(self):
        """
        raw token generator; answer each token with send(Instruction).
        """
        return scan(self._args, self._known_flags)

    def walk(self, callback, /):
        """
        call `callback(token)` for each raw token; its Instruction (or None)
        decides ambiguous flags and can stop the traversal.
        """
        walk(self._args, self._known_flags, callback)

    def tokens(self):
        """
        token generator applying the ambiguous_as_bool policy.
        """
        return resolve(self._args, self._known_flags, self._ambiguous_as_bool)

    def entries(self):
        """
        entry generator (flags with their values, terminator, positional runs).
        """
        return assemble(self.tokens())

    # --- transformer ------------------------------------------------------

    def map_entries(self, mapper, /):
        """
        Replace every entry by mapper(entry) and render the result.

        Parameters
        - mapper: Callable[[Entry], Entry | None]
          None drops the entry; any other entry contributes its tokens().

        Registry
        - when a FlagEntry is replaced by a FlagEntry with another name or
          bool-ness, the result's registry records the replacement; the
          registry is copied on the first such change. Without changes the
          result shares this list's registry.
        """
        args = []
        known_flags = self._known_flags

        for entry in self.entries():
            if (mapped := mapper(entry)) is None:
                continue
            if not isinstance(mapped, Entry):
                raise TypeError("map_entries() mapper must return an entry or None, not %r" % type(mapped).__name__)
            args.extend(mapped.tokens())
            if (
                isinstance(entry, FlagEntry)
                and isinstance(mapped, FlagEntry)
                and (entry.name != mapped.name or entry.bool != mapped.bool)
            ):
                if known_flags is self._known_flags:
                    known_flags = dict(known_flags)
                known_flags[mapped.name] = mapped.bool

        if known_flags is not self._known_flags:
            known_flags = registry.freeze(known_flags)
        return self._evolve(args, known_flags)

    def map_flags(self, mapper, /):
        """
        map_entries() restricted to flags: other entries pass through unchanged.
        """
        return self.map_entries(lambda entry: mapper(entry) if isinstance(entry, FlagEntry) else entry)

    # --- lookup and mutation ----------------------------------------------

    def lookup_flag(self, name, /):
        """
        return the first FlagEntry named `name`, or None.
        """
        for entry in self.entries():
            if isinstance(entry, FlagEntry) and entry.name == name:
                return entry
        return None

    def delete_flag(self, name, /):
        """
        drop every entry of flag `name`; returns (result, deleted).
        """
        deleted = False

        def mapper(entry):
            nonlocal deleted
            if isinstance(entry, FlagEntry) and entry.name == name:
                deleted = True
                return None
            return entry

        return self.map_entries(mapper), deleted

    def upsert_flag(self, insert, update, /):
        """
        Update every entry of flag `insert.name`, or insert `insert` in front.

        Parameters
        - insert: FlagEntry
          template: its name selects the entries to update; inserted as-is
          when no entry matches.
        - update: Callable[[FlagEntry], Entry | None]
          replacement for each matching entry (see map_entries()).

        Insertion
        - the template's tokens are prepended to the vector and the result's
          registry (a fresh copy) records the template's name and bool-ness.
        """
        if not isinstance(insert, FlagEntry):
            raise TypeError("upsert_flag() first argument must be a flag entry")
        updated = False

        def mapper(entry):
            nonlocal updated
            if isinstance(entry, FlagEntry) and entry.name == insert.name:
                updated = True
                return update(entry)
            return entry

        result = self.map_entries(mapper)
        if updated:
            return result

        return self._evolve(
            insert.tokens() + list(self._args),
            registry.merge(self._known_flags, {insert.name: insert.bool}),
        )

    def strip_unknown_flags(self, ignored=None, /):
        """
        Split the vector into (kept, stripped).

        The vector is classified with the registry plus `ignored` (names whose
        arity is known although they are not registered); a FlagEntry whose
        name is in neither goes to `stripped`, every other entry to `kept`.
        Both results keep this list's registry and policy.
        """
        scope = self.with_known_flags(ignored) if ignored else self
        stripped = []

        def mapper(entry):
            if isinstance(entry, FlagEntry) and entry.name not in scope._known_flags:
                stripped.extend(entry.tokens())
                return None
            return entry

        kept = scope.map_entries(mapper)
        return self._evolve(kept._args), self._evolve(stripped)


__all__ = (
    "Args",
)

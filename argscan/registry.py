"""
argscan registry: the known-flags mapping (bare name -> "is bool").

A registry is a read-only MappingProxyType over a private dict. Registries are
shared by reference between argument lists and never mutated in place: every
helper that changes one returns a fresh copy, leaving prior holders untouched.

Helpers
- freeze(mapping): validate and wrap (existing proxies are shared as-is).
- merge(registry, *others): fresh copy with the others' entries applied in order.
- remove(registry, names): fresh copy without the given names.
- from_parser(parser): derive a registry from an argparse.ArgumentParser.

Example
    >>> parser = argparse.ArgumentParser()
    >>> _ = parser.add_argument("-v", "--verbose", action="store_true")
    >>> _ = parser.add_argument("-o", "--output")
    >>> dict(from_parser(parser))
    {'h': True, 'help': True, 'v': True, 'verbose': True, 'o': False, 'output': False}
"""
from collections.abc import Iterable, Mapping
from types import MappingProxyType

EMPTY = MappingProxyType({})


def _validate(mapping):
    if not isinstance(mapping, Mapping):
        raise TypeError("known flags must be a mapping of flag names to booleans")
    for name, is_bool in mapping.items():
        if not isinstance(name, str):
            raise TypeError("known flag name %r must be a string" % (name,))
        if not name:
            raise ValueError("known flag name cannot be empty")
        if not isinstance(is_bool, bool):
            raise TypeError("known flag %r must map to a boolean" % name)


def freeze(mapping=None, /):
    """
    Return a read-only registry for `mapping`.

    - None gives the shared empty registry.
    - a MappingProxyType is returned unchanged, so it stays shared.
    - any other mapping is validated and copied.

    Raises
    - TypeError for non-mapping input, non-string names or non-bool values.
    - ValueError for empty names.
    """
    if mapping is None:
        return EMPTY
    if isinstance(mapping, MappingProxyType):
        return mapping
    _validate(mapping)
    return MappingProxyType(dict(mapping))


def merge(registry, /, *others):
    """
    Return a fresh registry: `registry` updated with every mapping in `others`.
    """
    clone = dict(registry)
    for other in others:
        _validate(other)
        clone.update(other)
    return MappingProxyType(clone)


def remove(registry, names, /):
    """
    Return a fresh registry without `names` (an iterable or mapping of flag names).
    """
    if isinstance(names, str) or not isinstance(names, Iterable):
        raise TypeError("names to remove must be an iterable of flag names")
    clone = dict(registry)
    for name in names:
        clone.pop(name, None)
    return MappingProxyType(clone)


def from_parser(parser, /):
    """
    Derive a registry from the options of an argparse.ArgumentParser.

    Every option string with a '-' prefix contributes its bare name; the flag
    is bool when its action consumes no argument (store_true, store_false,
    store_const, count, help, version, ...). Positional actions are skipped.
    """
    actions = getattr(parser, "_actions", None)
    if actions is None:
        raise TypeError("from_parser() argument must be an argparse.ArgumentParser")
    flags = {}
    for action in actions:
        for option in action.option_strings:
            if name := option.lstrip("-"):
                flags[name] = action.nargs == 0
    return MappingProxyType(flags)


__all__ = (
    "EMPTY",
    "freeze",
    "merge",
    "remove",
    "from_parser",
)

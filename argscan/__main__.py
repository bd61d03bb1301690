"""
argscan inspector: show how an argument vector is classified.

usage
    python -m argscan [-bool NAME]... [-value NAME]... [-as-bool]
                      [-tokens | -entries | -strip] [--] ARG...

options
    -bool NAME     register NAME as a known bool flag
    -value NAME    register NAME as a known value-taking flag
    -as-bool       resolve ambiguous unknown flags as bool flags
    -tokens        show the token stream (default)
    -entries       show the assembled entries
    -strip         show the result of stripping unknown flags
    -h, -help      show this message

The inspector reads its own options with argscan itself: every positional
argument, and everything after '--', is the vector to inspect.
"""
import sys

from rich.console import Console
from rich.text import Text

from .args import Args
from .entries import FlagEntry, UnnamedArgsEntry
from .rendering import render_entries, render_fault, render_strip, render_tokens
from .utils import Unset, coalesce, parse_bool

OPTIONS = {
    "bool": False,
    "value": False,
    "as-bool": True,
    "tokens": True,
    "entries": True,
    "strip": True,
    "h": True,
    "help": True,
}

RENDERERS = {
    "tokens": lambda args, colorful: render_tokens(args, colorful=colorful),
    "entries": lambda args, colorful: render_entries(args, colorful=colorful),
    "strip": lambda args, colorful: render_strip(*args.strip_unknown_flags(), colorful=colorful),
}


def _enabled(entry):
    return entry.value is None or bool(parse_bool(entry.value))


def main(argv=Unset, /, *, console=Unset, stderr=Unset, colorful=True):
    """
    Run the inspector and return the process exit status.

    Parameters
    - argv: Iterable[str] | Unset
      arguments without the program name (Unset: sys.argv[1:]).
    - console / stderr: rich consoles for output and faults.
    - colorful: render with styles.
    """
    console = coalesce(console, Console())
    stderr = coalesce(stderr, Console(stderr=True))
    argv = sys.argv[1:] if argv is Unset else argv

    known_flags = {}
    ambiguous_as_bool = False
    mode = "tokens"
    vector = []

    for entry in Args(argv, OPTIONS, ambiguous_as_bool=True).entries():
        match entry:
            case FlagEntry(name="bool" | "value") if not (entry.value or "").lstrip("-"):
                # also '-bool --': the terminator is taken as the value
                stderr.print(render_fault(
                    "option '-%s' needs a flag name" % entry.name,
                    "pass the name after a space or '=' (for example: -%s=verbose)" % entry.name,
                    title="missing flag name",
                    colorful=colorful,
                ))
                return 2
            case FlagEntry(name="bool" | "value"):
                known_flags[entry.value.lstrip("-")] = entry.name == "bool"
            case FlagEntry(name="as-bool"):
                ambiguous_as_bool = _enabled(entry)
            case FlagEntry(name="tokens" | "entries" | "strip") if _enabled(entry):
                mode = entry.name
            case FlagEntry(name="h" | "help"):
                console.print(Text(__doc__.strip()))
                return 0
            case FlagEntry(name=name) if name not in OPTIONS:
                stderr.print(render_fault(
                    "unknown option %r" % str(entry),
                    "run 'python -m argscan -help' to see the available options",
                    title="unknown option",
                    colorful=colorful,
                ))
                return 2
            case UnnamedArgsEntry():
                vector.extend(entry)

    args = Args(vector, known_flags, ambiguous_as_bool=ambiguous_as_bool)
    console.print(RENDERERS[mode](args, colorful))
    return 0


if __name__ == "__main__":
    sys.exit(main())

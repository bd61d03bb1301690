"""
argscan rendering: rich tables for token streams, entries and strip results.

Styling
- A built-in palette is used by default. A host application may override any
  style by defining a `__styles__` mapping in its `__main__` module, e.g.
      __styles__ = {"flag": "bold magenta", "terminator": "red"}
- colorful=False renders plain, unstyled output (useful for logs and tests).

Renderables
- render_tokens(args): one row per token, with the facts the scanner decided.
- render_entries(args): one row per entry with its canonical tokens.
- render_strip(kept, stripped): the two halves of Args.strip_unknown_flags().
- render_fault(message, hint): a short "header, message, hint" block.
"""
import shlex
from collections import defaultdict

from rich.box import ROUNDED
from rich.console import Group
from rich.table import Table
from rich.text import Text

from .entries import *
from .tokens import *

_PALETTE = {
    # tables
    "table-title": "bold #E6E6F0",
    "table-border": "#5F5F87",
    "index": "dim",

    # token roles and entry kinds
    "flag": "bold #00E5FF",
    "flag-value": "#9CE19C",
    "unnamed": "#C8C8D0",
    "terminator": "bold #FF4DA6",
    "unnamed-args": "#C8C8D0",

    # facts
    "known": "#9CE19C",
    "unknown": "#FFB400",
    "ambiguous": "italic #FFB400",

    # strip results
    "kept": "#9CE19C",
    "stripped": "#FF4DA6",

    # faults
    "prog-name": "bold #E6E6F0",
    "error-title": "bold #FF4DA6",
    "error-message": "#C8C8D0",
    "hint-arrow": "#9CE19C dim",
    "hint": "italic #9CE19C",
}


def palette(colorful=True):
    """
    return the effective styles: built-in palette updated with __main__.__styles__.
    """
    if not colorful:
        return defaultdict(str)
    main = __import__("__main__")
    return defaultdict(str, _PALETTE | getattr(main, "__styles__", {}))


def _table(title, *columns, styles):
    return Table(
        *columns,
        title=Text(title, styles["table-title"]),
        box=ROUNDED,
        border_style=styles["table-border"],
        header_style=styles["table-title"],
    )


def _facts(token, styles):
    facts = []
    if isinstance(token, FlagToken | FlagValueToken):
        facts.append(("known", styles["known"]) if token.known else ("unknown", styles["unknown"]))
    if isinstance(token, FlagToken):
        if token.ambiguous:
            facts.append(("ambiguous", styles["ambiguous"]))
        if token.bool:
            facts.append(("bool", ""))
        if token.inline:
            facts.append(("inline", ""))
        if token.double_dashed:
            facts.append(("double-dashed", ""))
    return Text(", ").join(Text(fact, style) for fact, style in facts)


def render_tokens(args, /, *, colorful=True):
    """
    Build a table of the tokens of `args` (an argscan.Args), policy applied.
    """
    styles = palette(colorful)
    table = _table("tokens", "#", "arg", "role", "name", "value", "facts", styles=styles)
    for index, token in enumerate(args.tokens(), 1):
        style = styles[token.role.name.lower().replace("_", "-")]
        table.add_row(
            Text(str(index), styles["index"]),
            Text(token.arg, style),
            Text(token.role.name.lower().replace("_", " "), style),
            getattr(token, "name", None) or "",
            Text(token.value if getattr(token, "value", None) is not None else ""),
            _facts(token, styles),
        )
    return table


def render_entries(args, /, *, colorful=True):
    """
    Build a table of the entries of `args` with their canonical tokens.
    """
    styles = palette(colorful)
    table = _table("entries", "#", "kind", "tokens", "name", "value", styles=styles)
    for index, entry in enumerate(args.entries(), 1):
        style = styles[entry.kind.name.lower().replace("_", "-")]
        table.add_row(
            Text(str(index), styles["index"]),
            Text(entry.kind.name.lower().replace("_", " "), style),
            Text(shlex.join(entry.tokens()), style),
            getattr(entry, "name", None) or "",
            getattr(entry, "value", None) or "",
        )
    return table


def render_strip(kept, stripped, /, *, colorful=True):
    """
    Build a two-row table from the (kept, stripped) pair of strip_unknown_flags().
    """
    styles = palette(colorful)
    table = _table("strip unknown flags", "part", "args", styles=styles)
    table.add_row(Text("kept", styles["kept"]), shlex.join(kept.args))
    table.add_row(Text("stripped", styles["stripped"]), shlex.join(stripped.args))
    return table


def render_fault(message, hint, /, *, title="error", prog="argscan", colorful=True):
    """
    Render a fault the way the inspector reports usage errors: a bracketed
    header, a one-sentence message and a single hint.
    """
    styles = palette(colorful)
    header = Text.assemble(
        "[ ",
        Text(prog, styles["prog-name"]),
        " | ",
        Text(title.title(), styles["error-title"]),
        " ]",
    )
    return Group(
        header,
        Text(message, styles["error-message"]),
        Text.assemble(Text(" → ", styles["hint-arrow"]), Text(hint, styles["hint"])),
    )


__all__ = (
    "palette",
    "render_tokens",
    "render_entries",
    "render_strip",
    "render_fault",
)

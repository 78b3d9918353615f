"""Numeric diff aggregation and the "+/-" diff graph.

``git diff --numstat`` lines are summed per first path component, so changes
inside a subdirectory show up on the directory's row.
"""

from __future__ import annotations

import re

from .git_status import first_component, unquote_path
from .listing import Diff, Entry
from .theme import DEFAULT_THEME, Theme

DEFAULT_DIFF_WIDTH = 4

_RENAME_ARROW = " => "
_BRACE_RENAME_RE = re.compile(r"\{([^{}]*) => ([^{}]*)\}")


def diff_count(field: str) -> int:
    """Parse one numstat count; binary files report ``-`` and count as 0."""
    try:
        value = int(field)
    except ValueError:
        return 0
    return value if value >= 0 else 0


def numstat_path(path_text: str) -> str:
    """Return the destination path of one ``--numstat`` path field.

    Renames appear as ``old => new`` or ``dir/{old => new}/file``. Paths git
    C-quotes are decoded the same way status paths are.
    """
    path_text = path_text.strip()
    if _RENAME_ARROW in path_text and "{" not in path_text:
        return unquote_path(path_text.rsplit(_RENAME_ARROW, 1)[1])
    path_text = unquote_path(path_text)
    match = _BRACE_RENAME_RE.search(path_text)
    if match is None:
        return path_text
    path = path_text[: match.start()] + match.group(2) + path_text[match.end() :]
    # "dir/{sub => }/file" leaves an empty component behind.
    return path.replace("//", "/").lstrip("/")


def collect_diff_totals(raw: str) -> dict[str, Diff]:
    """Sum added/removed counts of ``git diff --numstat`` output by first component."""
    totals: dict[str, Diff] = {}
    for line in raw.strip().splitlines():
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        key = first_component(numstat_path(parts[2]))
        previous = totals.get(key, Diff(0, 0))
        totals[key] = Diff(
            previous.added + diff_count(parts[0]),
            previous.removed + diff_count(parts[1]),
        )
    return totals


def parse_diff_stat(raw: str, entries: list[Entry]) -> None:
    """Attach summed diff totals to the entries they belong to."""
    totals = collect_diff_totals(raw)
    for entry in entries:
        total = totals.get(entry.name)
        if total is not None:
            entry.diff = total


def scale_linear(n: int, width: int, max_change: int) -> int:
    """Scale ``n`` into ``width`` columns, never dropping a nonzero count to 0.

    Scales as if the width were one column shorter and adds one, the same
    rounding git uses for ``--stat`` graphs.
    """
    if n == 0:
        return 0
    return 1 + (n * (width - 1) // max_change)


def diff_graph(diff: Diff | None, width: int = DEFAULT_DIFF_WIDTH, theme: Theme = DEFAULT_THEME) -> str:
    """Render ``diff`` as a colored run of "+" and "-" glyphs."""
    if diff is None:
        return ""

    added = diff.added
    removed = diff.removed
    total = added + removed
    if total > width:
        added = scale_linear(added, width, total)
        removed = scale_linear(removed, width, total)
    return f"{theme.diff_added}{'+' * added}{theme.diff_removed}{'-' * removed}{theme.reset}"


def apply_diff_graphs(entries: list[Entry], width: int = DEFAULT_DIFF_WIDTH, theme: Theme = DEFAULT_THEME) -> None:
    """Derive ``diff_graph`` for every entry from its diff totals."""
    for entry in entries:
        entry.diff_graph = diff_graph(entry.diff, width, theme)

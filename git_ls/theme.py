"""Style table used by the report renderers.

A theme maps semantic roles to ANSI escape sequences. Colors come from the
pygments console palette so the listing matches other pygments-colored output.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes


@dataclass(frozen=True)
class Theme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    directory: str
    executable: str
    diff_added: str
    diff_removed: str
    author: str
    issue: str
    branch: str


DEFAULT_THEME = Theme(
    name="default",
    reset=codes["reset"],
    directory=codes["blue"],
    executable=codes["green"],
    diff_added=codes["green"],
    diff_removed=codes["red"],
    author=codes["yellow"],
    issue=codes["blue"],
    branch=codes["red"],
)

PLAIN_THEME = Theme(
    name="plain",
    reset="",
    directory="",
    executable="",
    diff_added="",
    diff_removed="",
    author="",
    issue="",
    branch="",
)


def paint(theme: Theme, color: str, text: str) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, skipping empty colors."""
    if not color:
        return text
    return f"{color}{text}{theme.reset}"

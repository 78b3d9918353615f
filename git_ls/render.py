"""Column layout for the git-annotated directory report.

Measures every column across all entries first, then emits one line per entry.
Lines never grow past the terminal width: once a row reaches it, the remaining
columns are dropped, and author and subject are clipped to what is left.
"""

from __future__ import annotations

import socket
from pathlib import Path

from .ansi import hyperlink, pad_right, printable_width, sanitize_terminal_text
from .links import author_url, linkify
from .listing import Entry
from .theme import DEFAULT_THEME, Theme, paint


def file_url(root: Path, name: str, hostname: str) -> str:
    return f"file://{hostname}{root / name}"


def render_branch_header(branch: str, theme: Theme = DEFAULT_THEME) -> str:
    """Return the ``On branch ...`` banner printed above the table."""
    return f"On branch {paint(theme, theme.branch, sanitize_terminal_text(branch))}\n\n"


def _name_color(entry: Entry, theme: Theme) -> str:
    if entry.is_dir:
        return theme.directory
    if entry.is_executable:
        return theme.executable
    return ""


def _render_row(
    entry: Entry,
    *,
    max_status: int,
    max_graph: int,
    max_name: int,
    terminal_width: int | None,
    base_url: str,
    root: Path,
    theme: Theme,
    hostname: str,
) -> str:
    parts: list[str] = []
    line_width = 0

    def cut_off() -> bool:
        return terminal_width is not None and line_width >= terminal_width

    def budget(text: str) -> str:
        if terminal_width is None:
            return text
        return text[: max(0, min(len(text), terminal_width - 1 - line_width))]

    if max_status > 0:
        parts.append(entry.status.ljust(max_status) + " ")
        parts.append(pad_right(entry.diff_graph, max_graph + 1))
        line_width += max_status + 1 + max_graph + 1

    display_name = sanitize_terminal_text(entry.name)
    name_link = hyperlink(file_url(root, entry.name, hostname), display_name)
    padding = " " * max(0, max_name - len(display_name))
    parts.append(paint(theme, _name_color(entry, theme), name_link + padding))
    line_width += max_name

    commit = entry.commit
    date = commit.date if commit is not None else ""
    parts.append(f" {date}")
    line_width += len(date) + 1

    if commit is None or cut_off():
        return "".join(parts)

    author = budget(sanitize_terminal_text(commit.author))
    line_width += len(author) + 1
    if author and base_url:
        author = hyperlink(author_url(base_url, commit.author_email), author)
    parts.append(" " + (paint(theme, theme.author, author) if author else ""))

    if cut_off():
        return "".join(parts)

    subject = budget(sanitize_terminal_text(commit.subject))
    if subject and base_url:
        subject = linkify(subject, base_url, commit.hash, theme)
    parts.append(f" {subject}")
    return "".join(parts)


def render(
    entries: list[Entry],
    terminal_width: int | None,
    base_url: str,
    root: Path,
    theme: Theme = DEFAULT_THEME,
    hostname: str | None = None,
) -> str:
    """Render ``entries`` as aligned report lines.

    ``terminal_width`` of ``None`` or ``0`` renders without any width cutoff.
    ``base_url`` (the hosting service URL, possibly empty) turns on author and
    commit-subject hyperlinks. ``root`` is the absolute report directory used
    to build ``file://`` links for names.
    """
    if not entries:
        return ""
    if terminal_width is not None and terminal_width <= 0:
        terminal_width = None
    if hostname is None:
        hostname = socket.gethostname()

    max_status = max(len(entry.status) for entry in entries)
    max_graph = max(printable_width(entry.diff_graph) for entry in entries)
    max_name = max(len(sanitize_terminal_text(entry.name)) for entry in entries)

    lines = [
        _render_row(
            entry,
            max_status=max_status,
            max_graph=max_graph,
            max_name=max_name,
            terminal_width=terminal_width,
            base_url=base_url,
            root=root,
            theme=theme,
            hostname=hostname,
        )
        for entry in entries
    ]
    return "\n".join(lines) + "\n"

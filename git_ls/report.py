"""Assemble the full report for one directory.

Runs the git collaborators in sequence, fills in every entry, and returns the
finished text so nothing is printed when a collaborator fails.
"""

from __future__ import annotations

import os
from pathlib import Path

from . import git
from .diffstat import DEFAULT_DIFF_WIDTH, apply_diff_graphs, parse_diff_stat
from .git_log import parse_commits
from .git_status import parse_status
from .links import github_base_url
from .listing import Entry, list_entries
from .render import render, render_branch_header
from .theme import DEFAULT_THEME, Theme


def relative_base(directory: Path, repo_root: Path) -> str:
    """Return ``directory`` relative to the repository root, using ``/`` separators."""
    rel = os.path.relpath(directory.resolve(), repo_root.resolve())
    return Path(rel).as_posix()


def collect_entries(directory: Path, diff_width: int = DEFAULT_DIFF_WIDTH, theme: Theme = DEFAULT_THEME) -> list[Entry]:
    """List ``directory`` and annotate every entry with git information."""
    entries = list_entries(directory)
    root = git.git_root(directory)
    parse_status(git.git_status(directory), entries, relative_base(directory, root))
    parse_commits(entries, lambda name: git.git_log_record(directory, name))
    parse_diff_stat(git.git_diff_stat(directory), entries)
    apply_diff_graphs(entries, diff_width, theme)
    return entries


def build_report(
    directory: Path,
    terminal_width: int | None,
    diff_width: int = DEFAULT_DIFF_WIDTH,
    theme: Theme = DEFAULT_THEME,
) -> str:
    """Return the branch header and the rendered listing for ``directory``."""
    directory = directory.resolve()
    entries = collect_entries(directory, diff_width, theme)
    header = render_branch_header(git.git_current_branch(directory), theme)
    base_url = github_base_url(git.git_remotes(directory))
    return header + render(entries, terminal_width, base_url, directory, theme)

"""Report entries and directory enumeration.

One ``Entry`` per directory child. The aggregators fill in status, diff and
commit fields; renderers only read them.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path

from .errors import GitLsError


@dataclass(frozen=True)
class Diff:
    """Summed line counts for one entry."""

    added: int
    removed: int


@dataclass(frozen=True)
class Commit:
    """Last commit touching one entry."""

    hash: str
    date: str
    author: str
    author_email: str
    subject: str


@dataclass
class Entry:
    """One row of the report."""

    name: str
    is_dir: bool = False
    is_executable: bool = False
    status_codes: list[str] = field(default_factory=list)
    diff: Diff | None = None
    commit: Commit | None = None
    diff_graph: str = ""

    @property
    def status(self) -> str:
        """Status codes sorted, deduplicated and joined with commas."""
        return ",".join(sorted(set(self.status_codes)))


def _is_executable(path: Path) -> bool:
    try:
        mode = path.stat().st_mode
    except OSError:
        return False
    return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


def list_entries(directory: Path) -> list[Entry]:
    """Return one entry per child of ``directory``, sorted by name.

    Hidden files and the repository metadata directory are included. Raises
    ``GitLsError`` when the directory cannot be read.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                is_dir = child.is_dir(follow_symlinks=False)
                entries.append(
                    Entry(
                        name=child.name,
                        is_dir=is_dir,
                        is_executable=not is_dir and _is_executable(Path(child.path)),
                    )
                )
    except OSError as exc:
        raise GitLsError(f"Failed to read directory {directory}: {exc}") from exc

    entries.sort(key=lambda entry: entry.name)
    return entries

"""Last-commit records for report entries."""

from __future__ import annotations

from collections.abc import Callable

from .errors import GitLsError
from .listing import Commit, Entry

LOG_FIELD_SEPARATOR = "\0"
LOG_FIELD_COUNT = 5
LOG_PRETTY_FORMAT = "format:%h%x00%ad%x00%aN%x00%aE%x00%s"
LOG_DATE_FORMAT = "format:%Y-%m-%d"


def parse_commit(record: str, entry: Entry) -> None:
    """Fill ``entry.commit`` from one NUL-separated log record.

    An empty record means the name has no history and leaves the entry alone.
    Any other field count means git produced an unexpected format and raises
    ``GitLsError``.
    """
    if not record:
        return

    parts = record.split(LOG_FIELD_SEPARATOR, LOG_FIELD_COUNT - 1)
    if len(parts) != LOG_FIELD_COUNT:
        raise GitLsError(f"unexpected git log output format: {record!r}")

    commit_hash, date, author, author_email, subject = parts
    entry.commit = Commit(
        hash=commit_hash,
        date=date,
        author=author,
        author_email=author_email,
        subject=subject,
    )


def parse_commits(entries: list[Entry], log_for: Callable[[str], str]) -> None:
    """Look up and parse the last commit of every entry, one at a time."""
    for entry in entries:
        parse_commit(log_for(entry.name), entry)

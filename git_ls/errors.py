"""Error type shared by git collaborators and parsers."""

from __future__ import annotations


class GitLsError(Exception):
    """Unrecoverable failure; the CLI reports it and exits non-zero."""

"""Hosting-service links for commit subjects and authors."""

from __future__ import annotations

import re

from .ansi import hyperlink
from .theme import DEFAULT_THEME, Theme, paint

_GITHUB_REMOTE_RE = re.compile(r"github\.com[:/]([\w-]+)/([\w-]+)")
_ISSUE_RE = re.compile(r"#(\d+)")


def github_base_url(remotes: str) -> str:
    """Return ``https://github.com/<owner>/<repo>`` for the first GitHub remote.

    ``remotes`` is the text of ``git remote -v``. Returns ``""`` when no GitHub
    remote is configured, which disables hyperlinks to the hosting service.
    """
    match = _GITHUB_REMOTE_RE.search(remotes)
    if match is None:
        return ""
    return f"https://github.com/{match.group(1)}/{match.group(2)}"


def commit_url(base_url: str, commit_hash: str) -> str:
    return f"{base_url}/commit/{commit_hash}"


def issue_url(base_url: str, number: str) -> str:
    return f"{base_url}/pull/{number}"


def author_url(base_url: str, author_email: str) -> str:
    return f"{base_url}/commits?author={author_email}"


def linkify(subject: str, base_url: str, commit_hash: str, theme: Theme = DEFAULT_THEME) -> str:
    """Hyperlink ``subject`` to its commit, with ``#123`` references linked to pulls.

    Only escape sequences are added: the visible text of the result is exactly
    ``subject``.
    """
    target = commit_url(base_url, commit_hash)
    out: list[str] = []
    start = 0
    for match in _ISSUE_RE.finditer(subject):
        out.append(hyperlink(target, subject[start : match.start()]))
        out.append(hyperlink(issue_url(base_url, match.group(1)), paint(theme, theme.issue, match.group(0))))
        start = match.end()
    out.append(hyperlink(target, subject[start:]))
    return "".join(out)

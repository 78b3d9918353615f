"""Porcelain status aggregation.

Collects the status codes of every changed, untracked or ignored path and
attributes them to the directory entry named by the path's first component.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable

from .listing import Entry

GIT_STATUS_IGNORED = "I"
GIT_STATUS_METADATA = "*"
GIT_METADATA_DIR = ".git"

_RENAME_SEPARATOR = " -> "
_C_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


def first_component(path: str) -> str:
    """Return the leading component of a slash-separated path.

    ``"some/file/path"`` gives ``"some"``; a path without separators is
    returned unchanged.
    """
    head, _sep, _rest = path.partition("/")
    return head


def unquote_path(path_text: str) -> str:
    """Decode a path git wrapped in C-style double quotes.

    Unquoted text is returned unchanged. Octal escapes are collected as raw
    bytes and decoded as UTF-8 so multi-byte names survive.
    """
    if len(path_text) < 2 or not (path_text.startswith('"') and path_text.endswith('"')):
        return path_text

    body = path_text[1:-1]
    out = bytearray()
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch != "\\" or i + 1 >= n:
            out.extend(ch.encode("utf-8"))
            i += 1
            continue
        nxt = body[i + 1]
        octal = body[i + 1 : i + 4]
        if len(octal) == 3 and all(c in "01234567" for c in octal):
            out.append(int(octal, 8) & 0xFF)
            i += 4
            continue
        if nxt in _C_ESCAPES:
            out.append(_C_ESCAPES[nxt])
        else:
            out.extend(nxt.encode("utf-8"))
        i += 2
    return out.decode("utf-8", errors="replace")


def _destination_path(path_text: str) -> str:
    # Renames and copies are reported as "old -> new".
    if path_text.startswith('"'):
        closing = path_text.find('"' + _RENAME_SEPARATOR)
        if closing != -1:
            path_text = path_text[closing + 1 + len(_RENAME_SEPARATOR) :]
        return unquote_path(path_text)
    if _RENAME_SEPARATOR in path_text:
        path_text = path_text.rsplit(_RENAME_SEPARATOR, 1)[1]
    return unquote_path(path_text)


def _iter_status_records(raw: str) -> Iterable[tuple[str, str]]:
    for line in raw.splitlines():
        if len(line) < 4:
            continue
        yield line[:2], _destination_path(line[3:])


def collect_status_codes(raw: str, relative_base: str) -> dict[str, list[str]]:
    """Group porcelain status codes by the first component of each path.

    Paths are made relative to ``relative_base`` (the report directory relative
    to the repository root). Paths outside it produce keys such as ``".."``.
    """
    codes_by_key: dict[str, list[str]] = {}
    base = relative_base or "."
    for code, path in _iter_status_records(raw):
        key = first_component(posixpath.relpath(path, base))
        if code == "!!":
            code = GIT_STATUS_IGNORED
        codes_by_key.setdefault(key, []).append(code)
    return codes_by_key


def parse_status(raw: str, entries: list[Entry], relative_base: str) -> None:
    """Assign aggregated status codes from ``git status --porcelain`` to ``entries``."""
    codes_by_key = collect_status_codes(raw, relative_base)
    for entry in entries:
        codes = codes_by_key.get(entry.name)
        if codes is not None:
            entry.status_codes = sorted(set(codes))
        if entry.name == GIT_METADATA_DIR:
            entry.status_codes = [GIT_STATUS_METADATA]

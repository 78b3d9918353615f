"""ANSI-aware width measurement and OSC8 hyperlink helpers.

Every printable character counts as one column. Escape sequences, including
the OSC strings used for hyperlinks, count as zero.
"""

from __future__ import annotations

import re

ESC = "\x1b"
BEL = "\x07"
STRING_TERMINATOR = f"{ESC}\\"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f\x80-\x9f]")


def _is_ascii_letter(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def printable_width(text: str) -> int:
    """Return the number of visible columns in ``text``.

    ``ESC ]`` opens an OSC string that runs until ``BEL`` or ``ESC \\``. Any
    other escape runs until the first ASCII letter. Characters outside escapes
    are one column wide regardless of their real glyph width.
    """
    width = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != ESC:
            width += 1
            i += 1
            continue

        following = text[i + 1] if i + 1 < n else ""
        if following == "]":
            i += 2
            while i < n:
                if text[i] == BEL:
                    i += 1
                    break
                if text.startswith(STRING_TERMINATOR, i):
                    i += 2
                    break
                i += 1
            continue
        if following == "\\":
            i += 2
            continue

        i += 1
        while i < n:
            letter = _is_ascii_letter(text[i])
            i += 1
            if letter:
                break

    return width


def pad_right(text: str, width: int) -> str:
    """Pad styled ``text`` with spaces up to ``width`` printable columns."""
    missing = width - printable_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


def hyperlink(url: str, text: str) -> str:
    """Wrap ``text`` in an OSC8 hyperlink pointing at ``url``."""
    return f"{ESC}]8;;{url}{STRING_TERMINATOR}{text}{ESC}]8;;{STRING_TERMINATOR}"


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)

"""Terminal size detection."""

from __future__ import annotations

import os
from typing import TextIO


def terminal_columns(stream: TextIO) -> int | None:
    """Return the column count of the terminal behind ``stream``.

    Returns ``None`` when ``stream`` is not attached to a terminal or reports
    zero columns; callers render without a width cutoff in that case.
    """
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return None
    return columns if columns > 0 else None

"""Persistent JSON config helpers.

Stores listing defaults such as the diff-graph width. Malformed or missing
config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "git-ls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_diff_width() -> int | None:
    """Return the configured diff-graph width, or ``None`` when unset/invalid.

    Booleans and non-positive integers are rejected.
    """
    value = load_config().get("diff_width")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None

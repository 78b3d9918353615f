"""Git subprocess collaborators.

Each helper runs one read-only git command in the report directory and returns
its stdout. Any failure raises ``GitLsError``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import GitLsError
from .git_log import LOG_DATE_FORMAT, LOG_PRETTY_FORMAT

logger = logging.getLogger(__name__)


def run_git(cwd: Path, args: list[str]) -> str:
    """Run ``git <args>`` in ``cwd`` and return stdout."""
    command = ["git", *args]
    logger.debug("running %s in %s", " ".join(command), cwd)
    try:
        proc = subprocess.run(
            command,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise GitLsError(f"Failed to run {' '.join(command)}: {exc}") from exc
    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"exit status {proc.returncode}"
        raise GitLsError(f"{' '.join(command)} failed: {detail}")
    return proc.stdout


def git_root(cwd: Path) -> Path:
    return Path(run_git(cwd, ["rev-parse", "--show-toplevel"]).strip())


def git_status(cwd: Path) -> str:
    return run_git(cwd, ["status", "--porcelain", "--ignored"])


def git_diff_stat(cwd: Path) -> str:
    return run_git(cwd, ["diff", "--numstat", "--relative", "HEAD"])


def git_log_record(cwd: Path, name: str) -> str:
    """Return the NUL-separated last-commit record for ``name``, or ``""``."""
    return run_git(
        cwd,
        ["log", "-1", f"--date={LOG_DATE_FORMAT}", f"--pretty={LOG_PRETTY_FORMAT}", "--", name],
    )


def git_remotes(cwd: Path) -> str:
    return run_git(cwd, ["remote", "-v"])


def git_current_branch(cwd: Path) -> str:
    return run_git(cwd, ["rev-parse", "--abbrev-ref", "HEAD"]).strip()

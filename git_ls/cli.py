"""Command-line front door for git-ls.

Parses CLI options, resolves the target directory and prints the report.
Every ``GitLsError`` raised while building the report ends up in ``main``,
which logs it and exits non-zero.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .ansi import hyperlink
from .config import load_diff_width
from .diffstat import DEFAULT_DIFF_WIDTH
from .errors import GitLsError
from .report import build_report
from .terminal import terminal_columns
from .theme import DEFAULT_THEME, PLAIN_THEME

logger = logging.getLogger("git_ls")

PROJECT_URL = "https://github.com/llimllib/git-ls"

USAGE = """GIT-LS(1)

NAME
    git-ls - show the current directory annotated with links and git info

SYNOPSIS
    git ls [<dir>]

DESCRIPTION
    Displays the files in the current directory, their current git status, a short diffstat, their last modified date, the author and a portion of the last commit message for that file.

    All files are hyperlinked with OSC8 hyperlinks, so you should be able to open them by clicking on them in a properly-configured terminal. The author names are hyperlinked to github if the repository has a github remote, as are commit messages.

OPTIONS
    --version
        Print the version number and exit

    --help
        Print this message and exit

    --diffWidth=n
        Print the diffStat graph with the given width. Default is {default_width}

    --no-color
        Print names, status and commit fields without ANSI colors

    --debug
        Log every git command on standard error

{link}
"""


def usage_text(default_width: int = DEFAULT_DIFF_WIDTH) -> str:
    return USAGE.format(default_width=default_width, link=hyperlink(PROJECT_URL, PROJECT_URL))


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _configure_logging(debug: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("git-ls: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-ls",
        description="Show a directory annotated with git status, diffstat and last commit.",
        add_help=False,
    )
    parser.add_argument("dir", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-h", "--help", action="store_true", help="Print usage text and exit.")
    parser.add_argument("--version", action="store_true", help="Print the version number and exit.")
    parser.add_argument(
        "--diffWidth",
        dest="diff_width",
        type=_positive_int,
        default=None,
        help="Width of the diffstat graph.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--debug", action="store_true", help="Log git commands on stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the report for the chosen directory."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.debug)

    default_width = load_diff_width() or DEFAULT_DIFF_WIDTH
    if args.version:
        sys.stdout.write(f"{__version__}\n")
        return
    if args.help:
        sys.stdout.write(usage_text(default_width))
        return

    diff_width = args.diff_width if args.diff_width is not None else default_width
    directory = Path(args.dir) if args.dir is not None else Path.cwd()
    theme = PLAIN_THEME if args.no_color else DEFAULT_THEME
    try:
        report = build_report(directory, terminal_columns(sys.stdout), diff_width, theme=theme)
    except GitLsError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    sys.stdout.write(report)


if __name__ == "__main__":
    main()

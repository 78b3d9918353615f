"""Tests for terminal width detection."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from git_ls.terminal import terminal_columns


class _FakeTty:
    def fileno(self) -> int:
        return 1


class TerminalColumnsTests(unittest.TestCase):
    def test_non_terminal_stream_has_no_width(self) -> None:
        self.assertIsNone(terminal_columns(io.StringIO()))

    def test_terminal_columns_are_reported(self) -> None:
        with mock.patch("git_ls.terminal.os.get_terminal_size", return_value=os.terminal_size((132, 40))):
            self.assertEqual(terminal_columns(_FakeTty()), 132)

    def test_zero_columns_means_unknown(self) -> None:
        with mock.patch("git_ls.terminal.os.get_terminal_size", return_value=os.terminal_size((0, 0))):
            self.assertIsNone(terminal_columns(_FakeTty()))

    def test_ioctl_failure_means_unknown(self) -> None:
        with mock.patch("git_ls.terminal.os.get_terminal_size", side_effect=OSError("not a tty")):
            self.assertIsNone(terminal_columns(_FakeTty()))


if __name__ == "__main__":
    unittest.main()

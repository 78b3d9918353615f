"""Tests for NUL-separated last-commit records."""

from __future__ import annotations

import unittest

from git_ls.errors import GitLsError
from git_ls.git_log import parse_commit, parse_commits
from git_ls.listing import Commit, Entry


class ParseCommitTests(unittest.TestCase):
    def test_record_fills_commit_fields(self) -> None:
        entry = Entry("main.go")
        parse_commit("123abc\x002024-05-01\x00Jane Doe\x00jane@example.com\x00fix: pipes | stay (#17)", entry)
        self.assertEqual(
            entry.commit,
            Commit(
                hash="123abc",
                date="2024-05-01",
                author="Jane Doe",
                author_email="jane@example.com",
                subject="fix: pipes | stay (#17)",
            ),
        )

    def test_empty_record_means_no_history(self) -> None:
        entry = Entry("untracked.txt")
        parse_commit("", entry)
        self.assertIsNone(entry.commit)

    def test_wrong_field_count_is_fatal(self) -> None:
        with self.assertRaises(GitLsError):
            parse_commit("123abc\x002024-05-01\x00Jane", Entry("x"))

    def test_parse_commits_queries_each_entry_by_name(self) -> None:
        entries = [Entry("a"), Entry("b")]
        records = {"a": "1\x00d\x00n\x00e\x00s", "b": ""}
        queried: list[str] = []

        def log_for(name: str) -> str:
            queried.append(name)
            return records[name]

        parse_commits(entries, log_for)

        self.assertEqual(queried, ["a", "b"])
        self.assertEqual(entries[0].commit, Commit("1", "d", "n", "e", "s"))
        self.assertIsNone(entries[1].commit)


if __name__ == "__main__":
    unittest.main()

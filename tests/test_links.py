"""Tests for GitHub remote detection and commit-subject linkification."""

from __future__ import annotations

import re
import unittest

from git_ls.ansi import hyperlink, printable_width
from git_ls.links import github_base_url, linkify
from git_ls.theme import DEFAULT_THEME, PLAIN_THEME

_ESCAPES_RE = re.compile(r"\x1b\]8;;[^\x1b]*\x1b\\|\x1b\[[0-9;]*m")


def _visible(text: str) -> str:
    return _ESCAPES_RE.sub("", text)


class GithubBaseUrlTests(unittest.TestCase):
    def test_remote_detection(self) -> None:
        cases = {
            "ssh remote": (
                "origin\tgit@github.com:username/repo.git (fetch)\norigin\tgit@github.com:username/repo.git (push)",
                "https://github.com/username/repo",
            ),
            "https remote": (
                "origin\thttps://github.com/username/repo.git (fetch)\norigin\thttps://github.com/username/repo.git (push)",
                "https://github.com/username/repo",
            ),
            "other host": (
                "origin\tgit@example.com:username/repo.git (fetch)\norigin\tgit@example.com:username/repo.git (push)",
                "",
            ),
            "no remotes": ("", ""),
        }
        for name, (remotes, expected) in cases.items():
            with self.subTest(name):
                self.assertEqual(github_base_url(remotes), expected)

    def test_owner_and_repo_may_contain_dashes(self) -> None:
        self.assertEqual(
            github_base_url("origin\tgit@github.com:some-org/my-repo.git (fetch)"),
            "https://github.com/some-org/my-repo",
        )


class LinkifyTests(unittest.TestCase):
    base = "https://github.com/a/b"

    def test_issue_reference_is_split_into_three_links(self) -> None:
        result = linkify("fixes issue (#17)", self.base, "123abc", PLAIN_THEME)
        commit = f"{self.base}/commit/123abc"
        expected = (
            hyperlink(commit, "fixes issue (")
            + hyperlink(f"{self.base}/pull/17", "#17")
            + hyperlink(commit, ")")
        )
        self.assertEqual(result, expected)

    def test_issue_reference_is_colored(self) -> None:
        result = linkify("see #4", self.base, "h", DEFAULT_THEME)
        self.assertIn(f"{DEFAULT_THEME.issue}#4{DEFAULT_THEME.reset}", result)

    def test_subject_without_issues_links_to_commit(self) -> None:
        self.assertEqual(
            linkify("plain subject", self.base, "h", PLAIN_THEME),
            hyperlink(f"{self.base}/commit/h", "plain subject"),
        )

    def test_adjacent_and_leading_issue_references(self) -> None:
        result = linkify("#1#22 and #333", self.base, "h", PLAIN_THEME)
        self.assertIn(hyperlink(f"{self.base}/pull/1", "#1"), result)
        self.assertIn(hyperlink(f"{self.base}/pull/22", "#22"), result)
        self.assertIn(hyperlink(f"{self.base}/pull/333", "#333"), result)

    def test_visible_text_round_trips(self) -> None:
        subjects = [
            "",
            "fixes issue (#17)",
            "#1 at start",
            "ends with #99",
            "hash without digits # and #x",
            "two #1 refs #2 here | pipes",
        ]
        for subject in subjects:
            with self.subTest(subject=subject):
                result = linkify(subject, self.base, "abc", DEFAULT_THEME)
                self.assertEqual(_visible(result), subject)
                self.assertEqual(printable_width(result), len(subject))


if __name__ == "__main__":
    unittest.main()

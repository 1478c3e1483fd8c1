from __future__ import annotations

import pytest

from services.github_utils import extract_username, pinned_repo_name


@pytest.mark.parametrize("url,expected", [
    ("https://github.com/torvalds", "torvalds"),
    ("http://github.com/torvalds", "torvalds"),
    ("github.com/torvalds", "torvalds"),
    ("https://github.com/Some-User_42/some-repo", "Some-User_42"),
    ("https://github.com/octocat?tab=repositories", "octocat"),
])
def test_extract_username_valid_links(url, expected):
    assert extract_username(url) == expected


@pytest.mark.parametrize("url", [
    "https://gitlab.com/x",
    "https://www.github.com/torvalds",
    "ftp://github.com/torvalds",
    "https://github.com/",
    "see https://github.com/torvalds",
    " https://github.com/torvalds",
    "",
    None,
])
def test_extract_username_rejects_other_links(url):
    assert extract_username(url) is None


def test_pinned_repo_name_takes_trailing_segment():
    assert pinned_repo_name("https://github.com/torvalds/linux") == "linux"
    assert pinned_repo_name("https://github.com/torvalds/linux/") == "linux"
    assert pinned_repo_name(None) is None

"""Tests for the naive baseline matcher."""

import pytest

from pathtrie_lite.trie.naive import NaivePathMatcher, glob_match


class TestGlobMatch:

    @pytest.mark.parametrize("pattern, candidate, expected", [
        (b"", b"", True),
        (b"", b"a", False),
        (b"*", b"", True),
        (b"*", b"anything", True),
        (b"/a/*/c", b"/a/b/c", True),
        (b"/a/*/c", b"/a/b/b/c", True),
        (b"/a/*/c", b"/a/c", False),
        (b"/static/*", b"/static/", True),
        (b"/static/*", b"/static", False),
        (b"*ab", b"abab", True),
        (b"*ab", b"aba", False),
        (b"a**b", b"ab", True),
        (b"a*b*c", b"axxbyyc", True),
        (b"a*b*c", b"axxcyyb", False),
    ])
    def test_cases(self, pattern, candidate, expected):
        assert glob_match(pattern, candidate) is expected


class TestNaivePathMatcher:

    def test_any_pattern(self):
        m = NaivePathMatcher()
        m.add_paths(["/a/*", "/b"])
        assert m.pattern_count == 2
        assert m.match("/a/x")
        assert m.match("/b")
        assert not m.match("/c")

    def test_case_insensitive(self):
        m = NaivePathMatcher(case_insensitive=True)
        m.add_path("/A/*")
        assert m.match("/a/X")

"""Naive baseline: test every pattern individually.

This is what the trie replaces. Each pattern is matched against the
candidate with the classic two-pointer wildcard algorithm: on a "*"
remember where we are, and when a literal later fails, let the last
star absorb one more byte and retry. O(len(pattern) * len(candidate))
worst case per pattern, O(patterns) patterns per query.

Used as the reference for consistency tests and as the "before" side
of the profiling harness.
"""
from __future__ import annotations

from typing import Iterable

from pathtrie_lite.trie.arena import WILDCARD
from pathtrie_lite.trie.builder import encode


def glob_match(pattern: bytes, candidate: bytes) -> bool:
    """True if `candidate` matches `pattern`, where "*" is zero or more bytes."""
    p = c = 0
    star = -1
    resume = 0
    plen, clen = len(pattern), len(candidate)
    while c < clen:
        if p < plen and pattern[p] == WILDCARD:
            star = p
            resume = c
            p += 1
        elif p < plen and pattern[p] == candidate[c]:
            p += 1
            c += 1
        elif star >= 0:
            p = star + 1
            resume += 1
            c = resume
        else:
            return False
    while p < plen and pattern[p] == WILDCARD:
        p += 1
    return p == plen


class NaivePathMatcher:
    """Same interface as GlobPathMatcher, backed by a plain pattern list."""

    __slots__ = ("_patterns", "_case_insensitive")

    def __init__(self, case_insensitive: bool = False) -> None:
        self._patterns: list[bytes] = []
        self._case_insensitive = case_insensitive

    @property
    def pattern_count(self) -> int:
        return len(self._patterns)

    def add_path(self, pattern: str | bytes) -> None:
        self._patterns.append(encode(pattern, self._case_insensitive))

    def add_paths(self, patterns: Iterable[str | bytes]) -> None:
        for pattern in patterns:
            self.add_path(pattern)

    def match(self, candidate: str | bytes) -> bool:
        data = encode(candidate, self._case_insensitive)
        return any(glob_match(p, data) for p in self._patterns)

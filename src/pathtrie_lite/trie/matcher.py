"""GlobPathMatcher: build-once, query-many wildcard path matching.

Usage:
    matcher = GlobPathMatcher(case_insensitive=True)
    matcher.add_path("/static/*")
    matcher.add_path("/api/*/items")
    matcher.add_path("/healthz")

    matcher.match("/static/css/site.css")   # True
    matcher.match("/API/v2/items")          # True
    matcher.match("/api/v2/users")          # False

A pattern is a byte string where "*" stands for any run of zero or
more bytes. The wildcard is not segment-bounded: "/a/*/c" matches
"/a/b/b/c".

Query walk, at each position of the candidate:
  1. If the node has a wildcard child, try the wildcard first from the
     current position (it may absorb zero bytes).
  2. If the node has exactly one child (ONE_SHOT), compare against it
     directly. A wildcard-only node was covered by step 1.
  3. Otherwise scan the children for the byte.
When the candidate runs out, the node must be a pattern end, or have a
wildcard child that is one (the wildcard absorbs the empty suffix).

Wildcard consumption from a glob node G at position i: if G ends a
pattern, the rest of the candidate is absorbed and we are done.
Otherwise scan forward; wherever a byte equals one of G's literal
children, resume the normal walk from that child one byte later. With
a single literal child the scan is a bytes.find() skip.

The walk is a backtracking search over (position, node) pairs. It runs
on an explicit stack instead of recursion so a candidate with many
wildcards and tens of thousands of bytes cannot hit the interpreter's
recursion limit. Tasks are pushed so they pop in the same order the
recursive formulation would try them: wildcard before literal, earlier
wildcard splits before later ones.
"""
from __future__ import annotations

import logging
from typing import Iterable

from pathtrie_lite.trie.arena import GLOB_CHAR, ROOT, NodeArena
from pathtrie_lite.trie.builder import encode, insert_path
from pathtrie_lite.trie.flags import NodeAttr

log = logging.getLogger(__name__)

_GLOB = int(NodeAttr.GLOB)
_CAN_MATCH = int(NodeAttr.CAN_MATCH)
_GLOB_CHILD = int(NodeAttr.GLOB_CHILD)
_ONE_SHOT = int(NodeAttr.ONE_SHOT)

# work stack task kinds
_PATH = 0    # normal walk from (position, node)
_ENTER = 1   # enter a glob node at position
_SCAN = 2    # resume a glob node's forward scan at position


class InvalidState(Exception):
    """Raised when a matcher is used without having been constructed."""


class GlobPathMatcher:
    """Trie of path patterns with "*" wildcards.

    Not safe for concurrent add_path(). Once construction is finished,
    any number of threads may call match() at the same time: the query
    only reads the arena and keeps its work stack local.
    """

    __slots__ = ("_arena", "_case_insensitive", "_pattern_count")

    def __init__(self, case_insensitive: bool = False) -> None:
        self._arena = NodeArena()
        self._case_insensitive = case_insensitive
        self._pattern_count = 0

    @classmethod
    def from_patterns(
        cls,
        patterns: Iterable[str | bytes],
        case_insensitive: bool = False,
    ) -> GlobPathMatcher:
        """Build a matcher from a batch of patterns."""
        matcher = cls(case_insensitive=case_insensitive)
        matcher.add_paths(patterns)
        return matcher

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def pattern_count(self) -> int:
        """Number of add_path() calls, duplicates included."""
        return self._pattern_count

    @property
    def arena(self) -> NodeArena:
        return self._arena

    def add_path(self, pattern: str | bytes) -> None:
        """Insert one pattern. An empty pattern matches the empty candidate."""
        insert_path(self._require_arena(), encode(pattern, self._case_insensitive))
        self._pattern_count += 1

    def add_paths(self, patterns: Iterable[str | bytes]) -> None:
        arena = self._require_arena()
        before = arena.node_count()
        added = 0
        for pattern in patterns:
            self.add_path(pattern)
            added += 1
        log.debug(
            "inserted %d patterns: %d new nodes, %d nodes total",
            added, arena.node_count() - before, arena.node_count(),
        )

    def _require_arena(self) -> NodeArena:
        arena = getattr(self, "_arena", None)
        if arena is None:
            raise InvalidState(
                "GlobPathMatcher was not constructed; use GlobPathMatcher() "
                "or GlobPathMatcher.from_patterns()"
            )
        return arena

    def match(self, candidate: str | bytes) -> bool:
        """True if the candidate matches any inserted pattern."""
        return self._search(encode(candidate, self._case_insensitive))

    def __contains__(self, candidate: str | bytes) -> bool:
        return self.match(candidate)

    def match_many(self, candidates: Iterable[str | bytes]) -> list[bool]:
        return [self.match(c) for c in candidates]

    def node_count(self) -> int:
        return self._arena.node_count()

    def memory_usage_bytes(self) -> int:
        return self._arena.memory_usage_bytes()

    def dump(self) -> list[str]:
        """Diagnostic lines for every node, in preorder from the root."""
        lines: list[str] = []
        stack = [ROOT]
        while stack:
            node = stack.pop()
            lines.append(self._arena.describe(node))
            stack.extend(reversed(self._arena.children_of(node)))
        return lines

    # --- traversal ---

    def _search(self, s: bytes) -> bool:
        chars = self._arena.chars
        attrs = self._arena.attrs
        children = self._arena.children
        n = len(s)

        def glob_child(node: int) -> int:
            for idx in children[node]:
                if chars[idx] == GLOB_CHAR:
                    return idx
            raise AssertionError(f"node {node} has GLOB_CHILD but no glob child")

        def literal_child(node: int, part: int) -> int | None:
            kids = children[node]
            if attrs[node] & _ONE_SHOT:
                only = kids[0]
                return only if chars[only] == part else None
            for idx in kids:
                if chars[idx] == part:
                    return idx
            return None

        def accepts_empty(node: int) -> bool:
            a = attrs[node]
            if a & (_GLOB | _CAN_MATCH):
                return True
            # a chain of wildcard children can absorb nothing and still end a pattern
            while a & _GLOB_CHILD:
                node = glob_child(node)
                a = attrs[node]
                if a & _CAN_MATCH:
                    return True
            return False

        stack: list[tuple[int, int, int]] = [(_PATH, 0, ROOT)]
        while stack:
            kind, i, node = stack.pop()

            if kind == _PATH:
                while i < n:
                    nxt = literal_child(node, s[i])
                    if attrs[node] & _GLOB_CHILD:
                        # wildcard first; the literal edge is the fallback
                        if nxt is not None:
                            stack.append((_PATH, i + 1, nxt))
                        stack.append((_ENTER, i, glob_child(node)))
                        break
                    if nxt is None:
                        break
                    node = nxt
                    i += 1
                else:
                    if accepts_empty(node):
                        return True
                continue

            if kind == _ENTER:
                if attrs[node] & _CAN_MATCH:
                    return True
                stack.append((_SCAN, i, node))
                if attrs[node] & _GLOB_CHILD:
                    # "**": the inner wildcard can start at the same position
                    stack.append((_ENTER, i, glob_child(node)))
                continue

            # _SCAN: find the next byte that one of the literal children accepts
            kids = children[node]
            if attrs[node] & _ONE_SHOT:
                target = chars[kids[0]]
                if target == GLOB_CHAR:
                    continue
                j = s.find(target, i)
                if j < 0:
                    continue
                stack.append((_SCAN, j + 1, node))
                stack.append((_PATH, j + 1, kids[0]))
                continue
            for j in range(i, n):
                nxt = literal_child(node, s[j])
                if nxt is not None:
                    stack.append((_SCAN, j + 1, node))
                    stack.append((_PATH, j + 1, nxt))
                    break

        return False

"""Shared fixtures for glob path trie tests."""

from __future__ import annotations

import random

import pytest

from pathtrie_lite.trie.arena import GLOB_CHAR, ROOT, WILDCARD, NodeArena, NodeIndex

SEED = 42

ROUTES = [
    "/",
    "/healthz",
    "/static/*",
    "/api/v1/users",
    "/api/v1/users/*",
    "/api/*/orders",
    "/api/*/orders/*/items",
    "/assets/*.css",
    "/docs/*/index.html",
]


def walk(arena: NodeArena, path: bytes) -> NodeIndex | None:
    """Follow the exact edges of `path` from the root ("*" follows the glob edge)."""
    node = ROOT
    for part in path:
        c = GLOB_CHAR if part == WILDCARD else part
        nxt = arena.find_child(node, c)
        if nxt is None:
            return None
        node = nxt
    return node


def random_pattern(rng: random.Random, max_len: int = 6) -> str:
    return "".join(rng.choice("ab/*") for _ in range(rng.randint(0, max_len)))


def random_candidate(rng: random.Random, max_len: int = 8) -> str:
    return "".join(rng.choice("ab/") for _ in range(rng.randint(0, max_len)))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)

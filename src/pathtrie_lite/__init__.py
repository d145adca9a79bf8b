"""pathtrie-lite: compact wildcard path matching.

Re-exports the public types for convenient access:
    from pathtrie_lite import GlobPathMatcher, NodeAttr
"""
from pathtrie_lite.trie import (
    GlobPathMatcher,
    InvalidState,
    NaivePathMatcher,
    NodeAttr,
    describe_attrs,
)

__all__ = [
    "GlobPathMatcher",
    "InvalidState",
    "NaivePathMatcher",
    "NodeAttr",
    "describe_attrs",
]

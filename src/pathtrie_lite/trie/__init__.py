"""Glob path trie: node arena, builder and matcher."""

from pathtrie_lite.trie.arena import GLOB_CHAR, ROOT, NodeArena, NodeIndex
from pathtrie_lite.trie.flags import NodeAttr, describe_attrs
from pathtrie_lite.trie.matcher import GlobPathMatcher, InvalidState
from pathtrie_lite.trie.naive import NaivePathMatcher, glob_match

__all__ = [
    "GLOB_CHAR",
    "GlobPathMatcher",
    "InvalidState",
    "NaivePathMatcher",
    "NodeArena",
    "NodeAttr",
    "NodeIndex",
    "ROOT",
    "describe_attrs",
    "glob_match",
]

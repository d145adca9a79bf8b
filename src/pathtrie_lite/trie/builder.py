"""Insertion of one pattern into the node arena.

A pattern is walked one byte at a time from the root. Each byte is
case-folded (when configured) and "*" is mapped to GLOB_CHAR, then the
matching child is found or created. Along the way every node we leave
gets its ONE_SHOT hint recomputed, and wildcard steps mark both ends of
the edge (GLOB_CHILD on the parent, GLOB on the child). The node the
walk ends on is marked CAN_MATCH.

No alphabet validation happens here. Control characters, spaces and
reserved URL delimiters are stored as ordinary literal bytes.
"""
from __future__ import annotations

from pathtrie_lite.trie.arena import GLOB_CHAR, ROOT, WILDCARD, NodeArena, NodeIndex
from pathtrie_lite.trie.flags import NodeAttr


def encode(value: str | bytes, case_insensitive: bool = False) -> bytes:
    """Turn a pattern or candidate into the byte string the trie walks.

    str is encoded as UTF-8. Lone surrogates are passed through rather
    than rejected so that matching stays total for any str input.
    Case folding is ASCII only: bytes.lower() leaves non-ASCII bytes
    untouched, which is exactly the A-Z -> a-z folding we want.
    """
    if isinstance(value, str):
        data = value.encode("utf-8", "surrogatepass")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    else:
        raise TypeError(
            f"expected str or bytes, got {type(value).__name__}"
        )
    if case_insensitive:
        data = data.lower()
    return data


def insert_path(arena: NodeArena, data: bytes) -> NodeIndex:
    """Insert an already-encoded pattern and return its terminal node."""
    cur = ROOT
    for part in data:
        c = GLOB_CHAR if part == WILDCARD else part

        nxt = arena.find_child(cur, c)
        if nxt is None:
            nxt = arena.add_child(cur, c)

        # ONE_SHOT is only a hint: it flips off again once a sibling shows up
        if len(arena.children[cur]) == 1:
            arena.set_flag(cur, NodeAttr.ONE_SHOT)
        else:
            arena.clear_flag(cur, NodeAttr.ONE_SHOT)

        if c == GLOB_CHAR:
            arena.set_flag(cur, NodeAttr.GLOB_CHILD)
            arena.set_flag(nxt, NodeAttr.GLOB)
        cur = nxt

    # a node can be a match and still have children (a longer pattern)
    arena.set_flag(cur, NodeAttr.CAN_MATCH)
    return cur

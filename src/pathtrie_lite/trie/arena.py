"""Node arena: struct-of-arrays storage for the glob path trie.

Every node is a row index into three parallel columns:

    chars:     array('H')        incoming edge label, 2 bytes each
    attrs:     array('B')        NodeAttr bits, 1 byte each
    children:  list[list[int]]   child indexes, in insertion order

Row 0 is the root and exists from construction. Rows are only ever
appended, never freed or moved, so a NodeIndex handed out once stays
valid for the lifetime of the arena.

Edge labels are stored as 16-bit values so the wildcard sentinel
(GLOB_CHAR = 0x100) sits outside the byte range and can never be
confused with a literal byte from a pattern or a candidate.

Child lookup is a linear scan. URL paths are long literal runs with
low fan-out, so most nodes have one child and a scan over a short
list beats hashing.
"""
from __future__ import annotations

import array
import sys
from typing import NewType

from pathtrie_lite.trie.flags import NodeAttr, describe_attrs

NodeIndex = NewType("NodeIndex", int)

ROOT = NodeIndex(0)
GLOB_CHAR = 0x100
WILDCARD = ord("*")


class NodeArena:
    """Append-only columnar node storage.

    INVARIANT: children of a node are unique by char. The arena does
    not check this on append; the builder only appends after
    find_child() came back empty.
    """

    __slots__ = ("_chars", "_attrs", "_children")

    def __init__(self) -> None:
        self._chars = array.array("H", [0])   # root carries no label
        self._attrs = array.array("B", [0])
        self._children: list[list[int]] = [[]]

    # raw columns, read by the matcher's hot loop

    @property
    def chars(self) -> array.array:
        return self._chars

    @property
    def attrs(self) -> array.array:
        return self._attrs

    @property
    def children(self) -> list[list[int]]:
        return self._children

    def allocate(self, char: int) -> NodeIndex:
        """Append a node with no children and no attributes."""
        self._chars.append(char)
        self._attrs.append(0)
        self._children.append([])
        return NodeIndex(len(self._chars) - 1)

    def add_child(self, parent: NodeIndex, char: int) -> NodeIndex:
        """Allocate a node labelled `char` and attach it under `parent`."""
        idx = self.allocate(char)
        self._children[parent].append(idx)
        return idx

    def find_child(self, node: NodeIndex, char: int) -> NodeIndex | None:
        for idx in self._children[node]:
            if self._chars[idx] == char:
                return NodeIndex(idx)
        return None

    def char_of(self, node: NodeIndex) -> int:
        return self._chars[node]

    def attrs_of(self, node: NodeIndex) -> NodeAttr:
        return NodeAttr(self._attrs[node])

    def children_of(self, node: NodeIndex) -> list[NodeIndex]:
        return [NodeIndex(idx) for idx in self._children[node]]

    def has_flag(self, node: NodeIndex, flag: NodeAttr) -> bool:
        return bool(self._attrs[node] & flag)

    def set_flag(self, node: NodeIndex, flag: NodeAttr) -> None:
        self._attrs[node] |= int(flag)

    def clear_flag(self, node: NodeIndex, flag: NodeAttr) -> None:
        self._attrs[node] &= ~int(flag) & 0xFF

    def node_count(self) -> int:
        return len(self._chars)

    def describe(self, node: NodeIndex) -> str:
        """One diagnostic line: index, label, flags and child indexes."""
        c = self._chars[node]
        if node == ROOT:
            label = "<root>"
        elif c == GLOB_CHAR:
            label = "*"
        elif 0x21 <= c <= 0x7E:
            label = chr(c)
        else:
            label = f"\\x{c:02x}"
        flags = describe_attrs(self._attrs[node]) or "-"
        kids = ",".join(str(k) for k in self._children[node])
        return f"{node:>6} {label:<6} {flags:<36} [{kids}]"

    def memory_usage_bytes(self) -> int:
        """Approximate memory consumption.

        For array.array: sys.getsizeof covers header + buffer.
        For the children column: outer list shell + each inner list.
        Child indexes below 257 are cached small ints and cost nothing
        beyond their list slot; larger ones are not counted.
        """
        total = sys.getsizeof(self._chars) + sys.getsizeof(self._attrs)
        total += sys.getsizeof(self._children)
        for kids in self._children:
            total += sys.getsizeof(kids)
        return total

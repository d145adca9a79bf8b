"""Per-node attribute bits for the glob path trie.

Four independent flags packed into one byte per node:

    GLOB        node was reached through a wildcard edge
    CAN_MATCH   some inserted pattern ends exactly here
    GLOB_CHILD  one of the direct children is a wildcard node
    ONE_SHOT    node has exactly one child (fast-path hint)

The rendering used in diagnostics lists the active flag names in bit
order joined with "|". Values that do not fit in the four bits render
as "<unknown key: N>" so a corrupted attribute byte is visible in a
dump instead of silently truncated.
"""
from __future__ import annotations

from enum import IntFlag

_NAMES = ("glob", "can-match", "glob-child", "one-shot")


class NodeAttr(IntFlag):
    GLOB = 1 << 0
    CAN_MATCH = 1 << 1
    GLOB_CHILD = 1 << 2
    ONE_SHOT = 1 << 3

    def __str__(self) -> str:
        return describe_attrs(int(self))


ALL_ATTRS = NodeAttr.GLOB | NodeAttr.CAN_MATCH | NodeAttr.GLOB_CHILD | NodeAttr.ONE_SHOT


def describe_attrs(value: int) -> str:
    """Render an attribute byte as "glob|can-match|..." in bit order.

    Zero renders as the empty string.
    """
    if value < 0 or value > ALL_ATTRS:
        return f"<unknown key: {value}>"
    return "|".join(
        name for bit, name in enumerate(_NAMES) if value & (1 << bit)
    )

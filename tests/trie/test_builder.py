"""Tests for pattern encoding and insertion."""

import pytest

from pathtrie_lite.trie.arena import GLOB_CHAR, ROOT, NodeArena
from pathtrie_lite.trie.builder import encode, insert_path
from pathtrie_lite.trie.flags import NodeAttr

from tests.trie.conftest import random_pattern, walk


class TestEncode:

    def test_str_is_utf8(self):
        assert encode("/café") == b"/caf\xc3\xa9"

    def test_bytes_pass_through(self):
        assert encode(b"/A/b") == b"/A/b"
        assert encode(bytearray(b"/x")) == b"/x"

    def test_case_fold_is_ascii_only(self):
        assert encode("/ABC/xyz", case_insensitive=True) == b"/abc/xyz"
        # non-ASCII bytes are left alone
        assert encode("/Ä", case_insensitive=True) == b"/\xc3\x84"

    def test_case_preserved_by_default(self):
        assert encode("/ABC") == b"/ABC"

    def test_lone_surrogate_does_not_raise(self):
        assert encode("/\udc80") == "/\udc80".encode("utf-8", "surrogatepass")

    def test_rejects_other_types(self):
        with pytest.raises(TypeError, match="expected str or bytes"):
            encode(42)


class TestInsertStructure:

    def test_single_literal_path(self):
        a = NodeArena()
        end = insert_path(a, b"/a")
        assert a.node_count() == 3
        assert end == walk(a, b"/a")
        assert a.attrs_of(ROOT) == NodeAttr.ONE_SHOT
        assert a.attrs_of(walk(a, b"/")) == NodeAttr.ONE_SHOT
        assert a.attrs_of(end) == NodeAttr.CAN_MATCH

    def test_wildcard_edge_flags(self):
        a = NodeArena()
        insert_path(a, b"/*")
        slash = walk(a, b"/")
        glob = walk(a, b"/*")
        assert a.char_of(glob) == GLOB_CHAR
        assert a.attrs_of(slash) == NodeAttr.GLOB_CHILD | NodeAttr.ONE_SHOT
        assert a.attrs_of(glob) == NodeAttr.GLOB | NodeAttr.CAN_MATCH

    def test_shared_prefix_reuses_nodes(self):
        a = NodeArena()
        insert_path(a, b"/api/users")
        count = a.node_count()
        insert_path(a, b"/api/orders")
        # only "orders" is new
        assert a.node_count() == count + len(b"orders")

    def test_empty_pattern_marks_root(self):
        a = NodeArena()
        end = insert_path(a, b"")
        assert end == ROOT
        assert a.node_count() == 1
        assert a.has_flag(ROOT, NodeAttr.CAN_MATCH)

    def test_prefix_pattern_can_match_and_have_children(self):
        a = NodeArena()
        insert_path(a, b"/a/b")
        insert_path(a, b"/a")
        node = walk(a, b"/a")
        assert a.has_flag(node, NodeAttr.CAN_MATCH)
        assert a.has_flag(node, NodeAttr.ONE_SHOT)

    def test_ctrl_byte_and_wildcard_are_different_children(self):
        a = NodeArena()
        insert_path(a, b"/\x01")
        insert_path(a, b"/*")
        slash = walk(a, b"/")
        chars = sorted(a.char_of(c) for c in a.children_of(slash))
        assert chars == [0x01, GLOB_CHAR]

    def test_out_of_alphabet_bytes_are_literals(self):
        a = NodeArena()
        insert_path(a, b"/a b<>\x00")
        assert walk(a, b"/a b<>\x00") is not None
        assert a.has_flag(walk(a, b"/a b<>\x00"), NodeAttr.CAN_MATCH)


class TestOneShotMaintenance:

    def test_divergence_clears_one_shot(self):
        a = NodeArena()
        insert_path(a, b"/a/b")
        fork = walk(a, b"/a/")
        assert a.has_flag(fork, NodeAttr.ONE_SHOT)

        insert_path(a, b"/a/c")
        assert not a.has_flag(fork, NodeAttr.ONE_SHOT)
        assert len(a.children_of(fork)) == 2
        # single-child nodes elsewhere keep the hint
        for prefix in (b"", b"/", b"/a"):
            assert a.has_flag(walk(a, prefix), NodeAttr.ONE_SHOT), prefix
        # leaves never get it
        assert not a.has_flag(walk(a, b"/a/b"), NodeAttr.ONE_SHOT)
        assert not a.has_flag(walk(a, b"/a/c"), NodeAttr.ONE_SHOT)

    def test_one_shot_tracks_child_count_everywhere(self, rng):
        a = NodeArena()
        for _ in range(300):
            insert_path(a, random_pattern(rng).encode())
        for node in range(a.node_count()):
            expected = len(a.children[node]) == 1
            assert a.has_flag(node, NodeAttr.ONE_SHOT) == expected, node

    def test_glob_flags_agree_with_chars(self, rng):
        a = NodeArena()
        for _ in range(300):
            insert_path(a, random_pattern(rng).encode())
        for parent in range(a.node_count()):
            kids = a.children_of(parent)
            has_glob = any(a.char_of(k) == GLOB_CHAR for k in kids)
            assert a.has_flag(parent, NodeAttr.GLOB_CHILD) == has_glob
            for k in kids:
                assert a.has_flag(k, NodeAttr.GLOB) == (a.char_of(k) == GLOB_CHAR)
            chars = [a.char_of(k) for k in kids]
            assert len(chars) == len(set(chars))


class TestIdempotence:

    def test_same_pattern_twice(self):
        once = NodeArena()
        insert_path(once, b"/api/*/orders")
        twice = NodeArena()
        insert_path(twice, b"/api/*/orders")
        insert_path(twice, b"/api/*/orders")
        assert twice.node_count() == once.node_count()
        assert list(twice.attrs) == list(once.attrs)
        assert list(twice.chars) == list(once.chars)

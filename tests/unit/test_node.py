"""
Node Unit Tests
Tests for merkletree/merkle/node.py
"""
import dataclasses

import pytest

from fixtures import CANONICAL_HELLO_WORLD, LEAF_DIGESTS

from merkletree.crypto.hashing import hash_concat
from merkletree.merkle.node import Node
from merkletree.schemas.errors import ErrorCodes, InvalidDigestException


class TestLeaf:
    """Tests for leaf construction."""

    def test_leaf_digest_is_chained_hash_of_record(self):
        leaf = Node.leaf("Hello")

        assert leaf.digest == LEAF_DIGESTS["Hello"].encode("ascii")
        assert leaf.is_leaf()

    def test_empty_record_is_hashed_as_is(self):
        assert Node.leaf("").digest == LEAF_DIGESTS[""].encode("ascii")

    def test_leaf_has_no_children(self):
        leaf = Node.leaf("Hello")

        assert leaf.left_node() is None
        assert leaf.right_node() is None

    def test_leaf_depth_is_one(self):
        assert Node.leaf("Hello").depth() == 1


class TestParent:
    """Tests for parent construction."""

    def test_parent_of_two(self):
        left = Node.leaf("Hello")
        right = Node.leaf("World")

        parent = Node.parent(left, right)

        assert parent.hash() == CANONICAL_HELLO_WORLD.encode("ascii")
        assert parent.left_node() is left
        assert parent.right_node() is right
        assert not parent.is_leaf()

    def test_parent_without_right_duplicates_digest(self):
        """Lone node: right slot empty, digest computed as if duplicated."""
        lone = Node.leaf("From")

        parent = Node.parent(lone)

        assert parent.right_node() is None
        assert parent.left_node() is lone
        assert parent.digest == hash_concat(lone.digest, lone.digest)
        assert not parent.is_leaf()

    def test_parent_depth(self):
        parent = Node.parent(Node.leaf("a"), Node.leaf("b"))
        grandparent = Node.parent(parent)

        assert parent.depth() == 2
        assert grandparent.depth() == 3

    def test_depth_uses_longest_branch(self):
        deep = Node.parent(Node.parent(Node.leaf("a")))
        node = Node.parent(Node.leaf("b"), deep)

        assert node.depth() == 4


class TestNodeValueSemantics:
    """Nodes are immutable and compare structurally."""

    def test_node_is_frozen(self):
        leaf = Node.leaf("Hello")

        with pytest.raises(dataclasses.FrozenInstanceError):
            leaf.digest = b"tampered"

    def test_structural_equality(self):
        a = Node.parent(Node.leaf("x"), Node.leaf("y"))
        b = Node.parent(Node.leaf("x"), Node.leaf("y"))

        assert a == b

    def test_different_children_not_equal(self):
        a = Node.parent(Node.leaf("x"), Node.leaf("y"))
        b = Node.parent(Node.leaf("y"), Node.leaf("x"))

        assert a != b

    def test_hex(self):
        assert Node.leaf("Hello").hex() == LEAF_DIGESTS["Hello"]

    def test_repr_is_short(self):
        text = repr(Node.leaf("Hello"))

        assert text.startswith("Node(leaf")
        assert LEAF_DIGESTS["Hello"][:16] in text


class TestDigestValidation:
    """Nodes only hold 64-character lowercase hex digests."""

    def test_valid_digest_accepted(self):
        node = Node(digest=LEAF_DIGESTS["Hello"].encode("ascii"))

        assert node == Node.leaf("Hello")

    def test_non_ascii_digest_raises(self):
        with pytest.raises(InvalidDigestException) as exc_info:
            Node(digest=b"\xff\xfe")

        assert exc_info.value.code == ErrorCodes.INVALID_DIGEST
        assert exc_info.value.details["value"] == "\\xff\\xfe"

    def test_short_digest_raises(self):
        with pytest.raises(InvalidDigestException, match="64 lowercase hex"):
            Node(digest=b"abc")

    def test_uppercase_digest_raises(self):
        with pytest.raises(InvalidDigestException):
            Node(digest=LEAF_DIGESTS["Hello"].upper().encode("ascii"))

    def test_raw_digest_raises(self):
        with pytest.raises(InvalidDigestException):
            Node(digest=bytes.fromhex(LEAF_DIGESTS["Hello"]))

    def test_str_digest_raises(self):
        with pytest.raises(InvalidDigestException, match="must be bytes, got str"):
            Node(digest=LEAF_DIGESTS["Hello"])

    def test_invalid_child_digest_fails_before_parent(self):
        with pytest.raises(InvalidDigestException):
            Node.parent(Node.leaf("Hello"), Node(digest=b"not a digest"))

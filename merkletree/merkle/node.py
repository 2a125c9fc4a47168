"""
Merkle Tree Node

Immutable binary-tree element holding a chained digest and up to two
owned children. A node with no children is a leaf.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from merkletree.crypto.hashing import (
    CHAINED_DIGEST_LENGTH,
    chained_digest,
    digest_to_str,
    hash_concat,
    is_chained_digest,
)
from merkletree.schemas.errors import InvalidDigestException


@dataclass(frozen=True)
class Node:
    """
    A single node of a Merkle tree.

    Attributes:
        digest: Chained (hex text) digest of this node
        left: Left child, None for leaves
        right: Right child, None for leaves and for the lone
               trailing node of an odd layer
    """
    digest: bytes
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __post_init__(self) -> None:
        """Reject digests that are not 64 lowercase hex characters as bytes."""
        if not isinstance(self.digest, bytes):
            raise InvalidDigestException(
                f"Node digest must be bytes, got {type(self.digest).__name__}",
                value=repr(self.digest),
            )
        if not is_chained_digest(self.digest):
            raise InvalidDigestException(
                "Node digest must be a chained SHA-256 digest "
                f"({CHAINED_DIGEST_LENGTH} lowercase hex characters)",
                value=digest_to_str(self.digest),
            )

    @classmethod
    def leaf(cls, record: str, encoding: str = "utf-8") -> Node:
        """Create a leaf whose digest is the chained hash of the record bytes."""
        return cls(digest=chained_digest(record.encode(encoding)))

    @classmethod
    def parent(cls, left: Node, right: Optional[Node] = None) -> Node:
        """
        Create a parent of one or two nodes.

        Without a right child the left digest is hashed twice, but the
        right slot stays empty.
        """
        right_digest = right.digest if right is not None else left.digest
        return cls(
            digest=hash_concat(left.digest, right_digest),
            left=left,
            right=right,
        )

    def left_node(self) -> Optional[Node]:
        """Return the left child, or None if absent."""
        return self.left

    def right_node(self) -> Optional[Node]:
        """Return the right child, or None if absent."""
        return self.right

    def hash(self) -> bytes:
        """Return the chained digest of this node."""
        return self.digest

    def hex(self) -> str:
        return digest_to_str(self.digest)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def depth(self) -> int:
        """
        Number of nodes on the longest path from this node down to a leaf.

        A leaf has depth 1.
        """
        left_depth = self.left.depth() if self.left is not None else 0
        right_depth = self.right.depth() if self.right is not None else 0
        return max(left_depth, right_depth) + 1

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf() else "node"
        return f"Node({kind}, digest={self.hex()[:16]}...)"


__all__ = ["Node"]

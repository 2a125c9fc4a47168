"""
Merkle Tree Implementation
Deterministic Merkle tree construction over text records, plus
read-only queries (root digest, inclusion, depth, leaf count).

Canonical Commitment Rules (Hard Contracts):
1. Leaf digest: hex(sha256(record.encode("utf-8"))), stored as ASCII bytes
2. Parent digest: hex(sha256(left_digest + right_digest)), hashing the
   children's hex text, never their raw digests
3. Odd layer: the trailing node gets a parent with no right child whose
   digest is hex(sha256(digest + digest))
4. Empty input: the tree has no root
5. Single record: root = leaf

Construction reduces the most recent layer until two nodes remain, then
joins those two into the root. Example for five records:
    [a, b, c, d, e] -> [ab, cd, e_] -> [abcd, e__] -> root(abcd, e__)

Determinism Notes:
- No randomness or non-deterministic ordering
- Record order is defined by the caller and never sorted
"""
from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Set
from typing import Iterator, Optional, Sequence, Union

from merkletree.config.runtime import RuntimeConfig, get_default_config
from merkletree.merkle.node import Node
from merkletree.schemas.errors import (
    EmptyTreeException,
    InvalidInputException,
    MerkleTreeException,
)
from merkletree.schemas.tree import TreeSummary


logger = logging.getLogger(__name__)

# Ordered record input: a sequence, or an iterator consumed once in order
Records = Union[Sequence[str], Iterator[str]]


def build_leaves(records: Sequence[str], encoding: str = "utf-8") -> list[Node]:
    """
    Build the ground layer of the tree, one leaf per record.

    Args:
        records: Text records, in order. Empty strings are valid.
        encoding: Text encoding applied before hashing

    Returns:
        Leaf nodes in input order (empty list for no records)

    Raises:
        InvalidInputException: If a record cannot be encoded
    """
    leaves: list[Node] = []
    for index, record in enumerate(records):
        try:
            leaves.append(Node.leaf(record, encoding))
        except UnicodeEncodeError as e:
            raise InvalidInputException(
                f"Record at index {index} cannot be encoded as {encoding}: {e.reason}",
                index=index,
                actual_type=type(record).__name__,
            ) from e
    return leaves


def build_upper_layer(layer: Sequence[Node]) -> list[Node]:
    """
    Reduce one layer into the next layer up.

    Adjacent nodes are paired left to right. A trailing unpaired node
    gets a parent with an empty right slot and a duplicated-digest hash.

    Example: [a, b, c] -> [parent(a, b), parent(c, None)]

    Args:
        layer: Nodes of the current layer, in order

    Returns:
        Parent layer of length ceil(len(layer) / 2)
    """
    upper: list[Node] = []
    i = 0
    while i < len(layer):
        if i + 1 < len(layer):
            upper.append(Node.parent(layer[i], layer[i + 1]))
            i += 2
        else:
            upper.append(Node.parent(layer[i]))
            i += 1
    return upper


def build_root(left: Node, right: Node) -> Node:
    """Join the final two nodes into the root."""
    return Node.parent(left, right)


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the depth of a tree built from the given number of records.

    Depth is the number of levels from leaves to root (inclusive).
    A single leaf has depth 1, two leaves have depth 2, etc.

    Args:
        num_leaves: Number of records

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


def _validate_records(records: Records) -> list[str]:
    if isinstance(records, (str, bytes, bytearray)):
        raise InvalidInputException(
            "Records must be a sequence of strings, not a single "
            f"{type(records).__name__}",
            actual_type=type(records).__name__,
        )
    if isinstance(records, (Set, Mapping)):
        raise InvalidInputException(
            "Records must be ordered, got an unordered "
            f"{type(records).__name__}",
            actual_type=type(records).__name__,
        )
    try:
        materialized = list(records)
    except TypeError as e:
        raise InvalidInputException(
            f"Records must be iterable: {e}",
            actual_type=type(records).__name__,
        ) from e

    for index, record in enumerate(materialized):
        if not isinstance(record, str):
            raise InvalidInputException(
                f"Record at index {index} is not a string",
                index=index,
                actual_type=type(record).__name__,
            )
    return materialized


class MerkleTree:
    """
    Binary hash tree over an ordered sequence of text records.

    The tree starts empty (or seeded with a pre-built root) and is
    populated by ``build``. Rebuilding replaces the root wholesale.

    Example:
        >>> tree = MerkleTree().build(["Hello", "World", "From", "Rust"])
        >>> tree.root_hex()
        '725367a8cee028cf3360c19d20c175733191562b01e60d093e81d8570e865f81'
    """

    def __init__(
        self,
        root: Optional[Node] = None,
        config: Optional[RuntimeConfig] = None,
    ) -> None:
        self._root = root
        self._config = config or get_default_config()

    @property
    def config(self) -> RuntimeConfig:
        return self._config

    def build(self, records: Records) -> MerkleTree:
        """
        Build the tree from records, replacing any existing root.

        The previous root is kept if the records are rejected.

        Args:
            records: Ordered text records (sequence or iterator)

        Returns:
            This tree, for chaining

        Raises:
            InvalidInputException: If records is not an ordered collection
                                   of strings (sets and mappings are rejected)
        """
        validated = _validate_records(records)
        self._root = self._construct(validated)
        return self

    def _construct(self, records: list[str]) -> Optional[Node]:
        trace = self._config.logging.trace_build
        leaves = build_leaves(records, self._config.tree.record_encoding)

        if trace:
            for leaf in leaves:
                logger.debug(f"Leaf value: {leaf.hex()}")

        if not leaves:
            logger.debug("No records given, tree is empty")
            return None
        if len(leaves) == 1:
            logger.debug("Single record, leaf is the root")
            return leaves[0]

        layer_sizes = [len(leaves)]
        layer = build_upper_layer(leaves)
        layer_sizes.append(len(layer))
        self._trace_layer(layer, trace)

        if len(layer) == 1:
            logger.debug(
                f"Built tree from {len(records)} records with layer sizes {layer_sizes}"
            )
            return layer[0]

        while len(layer) > 2:
            layer = build_upper_layer(layer)
            layer_sizes.append(len(layer))
            self._trace_layer(layer, trace)

        # A layer longer than two always reduces to at least two nodes,
        # so the final layer holds exactly the last two nodes produced.
        if len(layer) != 2:
            raise MerkleTreeException(
                f"Terminal layer must hold two nodes, got {len(layer)}",
                details={"layer_sizes": layer_sizes},
            )
        root = build_root(layer[0], layer[1])
        layer_sizes.append(1)
        if trace:
            logger.debug(f"Root left value being hashed: {layer[0].hex()}")
            logger.debug(f"Root right value being hashed: {layer[1].hex()}")
        logger.debug(
            f"Built tree from {len(records)} records with layer sizes "
            f"{layer_sizes}, root {root.hex()}"
        )
        return root

    @staticmethod
    def _trace_layer(layer: Sequence[Node], trace: bool) -> None:
        if not trace:
            return
        for node in layer:
            logger.debug(f"After build_upper_layer: {node.hex()}")

    def root_node(self) -> Optional[Node]:
        """Return the root node, or None if the tree is empty."""
        return self._root

    def root_digest(self) -> Optional[bytes]:
        """Return the chained digest of the root, or None if empty."""
        if self._root is None:
            return None
        return self._root.digest

    def root_hex(self) -> Optional[str]:
        """Return the root digest as a string, or None if empty."""
        if self._root is None:
            return None
        return self._root.hex()

    def is_empty(self) -> bool:
        return self._root is None

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every node breadth-first, starting at the root."""
        if self._root is None:
            return
        queue: deque[Node] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def includes(self, candidate: bytes | str) -> bool:
        """
        Check whether a digest appears on any node of the tree.

        This scans the whole tree; it is not an audit-path proof.

        Note: the candidate must be a chained digest, not the record itself.

        Args:
            candidate: Chained digest as bytes or hex string

        Returns:
            True if some node (leaf or internal) has exactly this digest

        Raises:
            InvalidInputException: If candidate is not bytes or str
        """
        if isinstance(candidate, str):
            try:
                candidate = candidate.encode("ascii")
            except UnicodeEncodeError:
                return False
        elif isinstance(candidate, (bytearray, memoryview)):
            candidate = bytes(candidate)
        elif not isinstance(candidate, bytes):
            raise InvalidInputException(
                "Inclusion candidate must be bytes or str",
                actual_type=type(candidate).__name__,
            )

        return any(node.digest == candidate for node in self.iter_nodes())

    def depth(self) -> int:
        """
        Return the depth of the tree from the root to the deepest leaf.

        Raises:
            EmptyTreeException: If the tree has no root
        """
        if self._root is None:
            raise EmptyTreeException(
                "Cannot compute depth of an empty tree",
                operation="depth",
            )
        return self._root.depth()

    def leaf_count(self) -> int:
        """Return the number of leaves in the tree (0 if empty)."""
        return sum(1 for node in self.iter_nodes() if node.is_leaf())

    def summary(self) -> TreeSummary:
        """Return a serializable snapshot of the tree's properties."""
        return TreeSummary(
            root_digest=self.root_hex(),
            depth=0 if self.is_empty() else self.depth(),
            leaf_count=self.leaf_count(),
        )

    def __repr__(self) -> str:
        root = self.root_hex()
        return f"MerkleTree(root={root[:16] + '...' if root else None})"


__all__ = [
    "MerkleTree",
    "build_leaves",
    "build_upper_layer",
    "build_root",
    "compute_tree_depth",
]

"""
Merkle Tree

Binary hash tree over ordered text records.

This module provides:
- Node: Immutable tree element holding a chained digest
- MerkleTree: Construction plus root/inclusion/depth/leaf-count queries
- build_leaves / build_upper_layer / build_root: Construction steps
- compute_tree_depth: Expected depth for a given number of records

Usage:
    from merkletree.merkle import MerkleTree

    tree = MerkleTree().build(["Hello", "World", "From", "Rust"])
    tree.root_digest()
    tree.includes(b"d9aa89fdd15ad5c41d9c128feffe9e07dc828b83f85296f7f42bda506821300e")
"""
from .node import Node

from .merkle_tree import (
    MerkleTree,
    build_leaves,
    build_upper_layer,
    build_root,
    compute_tree_depth,
)


__all__ = [
    "Node",
    "MerkleTree",
    "build_leaves",
    "build_upper_layer",
    "build_root",
    "compute_tree_depth",
]

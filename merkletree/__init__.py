"""
merkletree

Binary hash (Merkle) tree over ordered text records with hex-text digest
chaining, plus queries for the root digest, inclusion, depth and leaf count.
"""

from merkletree.config import RuntimeConfig, configure_logging
from merkletree.merkle import MerkleTree, Node, compute_tree_depth
from merkletree.schemas import (
    EmptyTreeException,
    InvalidInputException,
    MerkleTreeException,
    TreeSummary,
)

__all__ = [
    "MerkleTree",
    "Node",
    "compute_tree_depth",
    "RuntimeConfig",
    "configure_logging",
    "EmptyTreeException",
    "InvalidInputException",
    "MerkleTreeException",
    "TreeSummary",
]

__version__ = "0.1.0"

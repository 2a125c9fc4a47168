"""
Test fixtures package for merkletree tests.

This package provides known-answer vectors and factory functions:
- tree_fixtures.py: canonical records, boundary roots, tree factories

Usage:
    from fixtures import make_tree, CANONICAL_ROOT

    def test_something():
        tree = make_tree()
        assert tree.root_hex() == CANONICAL_ROOT
"""

from .tree_fixtures import (
    BOUNDARY_RECORDS,
    BOUNDARY_ROOTS,
    CANONICAL_FROM_RUST,
    CANONICAL_HELLO_WORLD,
    CANONICAL_INCLUDED,
    CANONICAL_RECORDS,
    CANONICAL_ROOT,
    LEAF_DIGESTS,
    make_records,
    make_tree,
)

__all__ = [
    "BOUNDARY_RECORDS",
    "BOUNDARY_ROOTS",
    "CANONICAL_FROM_RUST",
    "CANONICAL_HELLO_WORLD",
    "CANONICAL_INCLUDED",
    "CANONICAL_RECORDS",
    "CANONICAL_ROOT",
    "LEAF_DIGESTS",
    "make_records",
    "make_tree",
]

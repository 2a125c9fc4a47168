"""
Schemas

Purpose: Export the error taxonomy and serializable tree snapshots.
"""

# Error models and exceptions
from .errors import (
    ConfigException,
    EmptyTreeException,
    ErrorCodes,
    InvalidDigestException,
    InvalidInputError,
    InvalidInputException,
    MerkleTreeError,
    MerkleTreeException,
)

# Tree snapshots
from .tree import TreeSummary

__all__ = [
    # Errors
    "ConfigException",
    "EmptyTreeException",
    "ErrorCodes",
    "InvalidDigestException",
    "InvalidInputError",
    "InvalidInputException",
    "MerkleTreeError",
    "MerkleTreeException",
    # Tree
    "TreeSummary",
]

"""
Core cryptographic utilities.

SHA-256 hashing and hex-text digest chaining used by the Merkle tree.
"""
from .hashing import (
    CHAINED_DIGEST_LENGTH,
    sha256,
    chained_digest,
    hash_concat,
    to_hex,
    from_hex,
    digest_to_str,
    is_chained_digest,
)

__all__ = [
    "CHAINED_DIGEST_LENGTH",
    "sha256",
    "chained_digest",
    "hash_concat",
    "to_hex",
    "from_hex",
    "digest_to_str",
    "is_chained_digest",
]

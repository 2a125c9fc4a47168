"""
Hashing Utilities
SHA-256 primitives and hex-text digest chaining for the Merkle tree.

This module provides:
- SHA-256 hashing for raw bytes
- Chained digests: the lowercase hex text of a SHA-256 digest, as bytes
- Hex encoding/decoding between raw digests and their text form

Chaining Rules (Hard Contracts):
1. Leaf digest: chained_digest(record_bytes)
2. Parent digest: chained_digest(left_digest + right_digest)
   where both inputs are already chained (hex text), NOT raw digests.

Hashing the raw 32-byte digests instead of their 64-byte hex text produces
different roots and breaks compatibility with published vectors.
"""
from __future__ import annotations

import hashlib
import string

from merkletree.schemas.errors import InvalidDigestException


# Length of a chained SHA-256 digest (hex text)
CHAINED_DIGEST_LENGTH: int = 64

_HEX_DIGITS = frozenset(string.hexdigits.lower().encode("ascii"))


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def chained_digest(data: bytes) -> bytes:
    """
    Hash raw bytes and return the hex text of the digest as bytes.

    This is the form stored on every node and fed into the next hash.

    Args:
        data: Raw bytes to hash

    Returns:
        64-byte ASCII hex encoding of the SHA-256 digest

    Example:
        >>> chained_digest(b"Hello")
        b'185f8db32271fe25f561a6fc938b2e264306ec304eda518007d1764826381969'
    """
    return hashlib.sha256(data).hexdigest().encode("ascii")


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Chained hash of the concatenation of two digests.

    This is used for computing Merkle parent digests:
    parent = chained_digest(left + right)

    Args:
        left: Left child digest (hex text bytes)
        right: Right child digest (hex text bytes)

    Returns:
        64-byte chained digest of the concatenation
    """
    hasher = hashlib.sha256()
    hasher.update(left)
    hasher.update(right)
    return hasher.hexdigest().encode("ascii")


def to_hex(data: bytes) -> str:
    """
    Convert a raw digest to its hex text.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hex text back into a raw digest.

    Args:
        hex_string: Hex string, optionally with a 0x prefix

    Returns:
        Decoded bytes

    Raises:
        InvalidDigestException: If the string has odd length or
                                contains invalid hex characters
    """
    hex_content = hex_string[2:] if hex_string.startswith("0x") else hex_string

    if len(hex_content) % 2 != 0:
        raise InvalidDigestException(
            f"Hex string must have even length, got length {len(hex_content)}",
            value=hex_string,
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise InvalidDigestException(
            f"Invalid hex characters in string: {e}",
            value=hex_string,
        ) from e


def digest_to_str(digest: bytes) -> str:
    """
    Decode a chained digest into a plain string.

    Non-ASCII bytes are rendered as backslash escapes instead of raising.
    """
    return digest.decode("ascii", errors="backslashreplace")


def is_chained_digest(value: bytes | str) -> bool:
    """
    Check whether a value looks like a chained SHA-256 digest.

    A chained digest is exactly 64 lowercase hex characters.
    """
    if isinstance(value, str):
        try:
            value = value.encode("ascii")
        except UnicodeEncodeError:
            return False
    if not isinstance(value, bytes) or len(value) != CHAINED_DIGEST_LENGTH:
        return False
    return all(byte in _HEX_DIGITS for byte in value)


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

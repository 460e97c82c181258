"""Hash primitives for trie digests.

The trie treats the primitive as a black box: bytes in, fixed-length
digest out. Also provides to_bit_string for rendering keys as the
branch path a trie walk follows.
"""
import hashlib
from typing import Callable

import blake3

from ..core.constants import BITS_PER_BYTE

Hasher = Callable[[bytes], bytes]


def sha256_digest(data: bytes) -> bytes:
    """SHA-256 digest of data (32 bytes)."""
    return hashlib.sha256(data).digest()


def blake3_digest(data: bytes) -> bytes:
    """BLAKE3 digest of data (32 bytes)."""
    return blake3.blake3(data).digest()


HASHERS: dict[str, Hasher] = {
    "sha256": sha256_digest,
    "blake3": blake3_digest,
}


def get_hasher(algorithm: str) -> Hasher:
    """Look up a hash primitive by name.

    Args:
        algorithm: One of the names in HASHERS

    Returns:
        Callable mapping bytes to a digest

    Raises:
        ValueError: If algorithm is not registered
    """
    try:
        return HASHERS[algorithm]
    except KeyError:
        known = ", ".join(sorted(HASHERS))
        raise ValueError(f"Unknown hash algorithm {algorithm!r} (known: {known})") from None


def empty_digest(algorithm: str) -> bytes:
    """Digest of the empty input, the root of an empty trie."""
    return get_hasher(algorithm)(b"")


def to_bit_string(data: bytes, depth: int | None = None) -> str:
    """Render bytes as a string of '0'/'1', most significant bit first.

    Args:
        data: Bytes to render
        depth: Number of leading bits to keep (default: all)

    Returns:
        Binary string, e.g. b"\\x05" -> '00000101'
    """
    bits = "".join(format(b, "08b") for b in data)
    if depth is None:
        return bits
    if depth > len(data) * BITS_PER_BYTE:
        raise ValueError(f"depth {depth} exceeds {len(data) * BITS_PER_BYTE} available bits")
    return bits[:depth]

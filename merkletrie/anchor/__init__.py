"""Anchor subpackage for cryptographic digests.

Provides hash primitives, Merkle aggregation and root verification.
"""
from .hash import HASHERS, empty_digest, get_hasher, to_bit_string
from .merkle import node_digest
from .verify import verify_root

__all__ = [
    "HASHERS",
    "get_hasher",
    "empty_digest",
    "to_bit_string",
    "node_digest",
    "verify_root",
]

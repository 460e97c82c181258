"""Core subpackage for merkletrie primitives.

Exports errors, receipts and constants used across the package.
"""
from .errors import InvalidKeyLength, TrieError
from .receipt import StopRule, dual_hash, emit_receipt

__all__ = [
    "InvalidKeyLength",
    "TrieError",
    "StopRule",
    "dual_hash",
    "emit_receipt",
]

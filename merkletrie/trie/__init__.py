"""Trie subpackage: node variants and the MerkleTrie facade."""
from .merkle_trie import MerkleTrie
from .node import Internal, Leaf, bit_at, first_divergent_bit

__all__ = [
    "MerkleTrie",
    "Leaf",
    "Internal",
    "bit_at",
    "first_divergent_bit",
]

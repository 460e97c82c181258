"""merkletrie: binary prefix trie over key bits with a Merkle root.

Public API:
- Trie: MerkleTrie, Leaf, Internal
- Anchor: get_hasher, empty_digest, node_digest, verify_root
- Core: InvalidKeyLength, TrieError, StopRule, dual_hash, emit_receipt
- Config: TrieConfig, load_config
"""
from .anchor import empty_digest, get_hasher, node_digest, verify_root
from .config import TrieConfig, load_config
from .core import InvalidKeyLength, StopRule, TrieError, dual_hash, emit_receipt
from .trie import Internal, Leaf, MerkleTrie

__version__ = "1.0.0"

__all__ = [
    # Trie
    "MerkleTrie",
    "Leaf",
    "Internal",
    # Anchor
    "get_hasher",
    "empty_digest",
    "node_digest",
    "verify_root",
    # Core
    "InvalidKeyLength",
    "TrieError",
    "StopRule",
    "dual_hash",
    "emit_receipt",
    # Config
    "TrieConfig",
    "load_config",
]

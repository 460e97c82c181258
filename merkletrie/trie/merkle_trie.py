"""MerkleTrie facade: binary trie over key bits with a Merkle root.

Owns the root node and the empty-tree special case. All node work is
delegated to trie.node; digests come from anchor.merkle.
"""
import logging
import sys
from typing import Iterator, TextIO

from ..anchor.hash import empty_digest, get_hasher, to_bit_string
from ..anchor.merkle import node_digest
from ..core.constants import DEFAULT_HASH_ALGORITHM, MAX_KEY_BYTES_UNLIMITED
from ..core.errors import InvalidKeyLength
from . import node as nodes
from .node import Internal, Leaf

logger = logging.getLogger("merkletrie.trie")


def _as_bytes(data, name: str) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")


class MerkleTrie:
    """Prefix tree for fixed-length binary keys with a bottom-up digest.

    Attributes:
        root: Root node; a childless Internal placeholder while empty
        empty: True until the first insert
        algorithm: Name of the hash primitive
        max_key_bytes: Longest accepted key, 0 for no limit
    """

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM,
                 max_key_bytes: int = MAX_KEY_BYTES_UNLIMITED):
        """Initialize an empty trie.

        Args:
            algorithm: Hash primitive name (sha256 or blake3)
            max_key_bytes: Longest accepted key in bytes, 0 for no limit

        Raises:
            ValueError: If algorithm is unknown or max_key_bytes < 0
        """
        if max_key_bytes < 0:
            raise ValueError(f"max_key_bytes must be >= 0, got {max_key_bytes}")
        self._hasher = get_hasher(algorithm)
        self.algorithm = algorithm
        self.max_key_bytes = max_key_bytes
        self.root: Leaf | Internal = Internal(0)
        self.empty = True
        self._size = 0

    def __repr__(self) -> str:
        return (f"MerkleTrie(algorithm={self.algorithm!r}, keys={self._size}, "
                f"max_depth={self.max_depth()})")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.get(key) is not None

    def __iter__(self) -> Iterator[bytes]:
        for _, key, _ in self.items():
            yield key

    def _check_key(self, key: bytes) -> None:
        if not key:
            raise InvalidKeyLength(0, message="Key must not be empty")
        if self.max_key_bytes and len(key) > self.max_key_bytes:
            raise InvalidKeyLength(
                len(key),
                message=f"Key of {len(key)} bytes exceeds max_key_bytes={self.max_key_bytes}",
            )

    def insert(self, key: bytes, value: bytes) -> None:
        """Add key with value, or replace the value if key exists.

        Args:
            key: Non-empty key bytes; keys in one trie should share a length
            value: Value bytes

        Raises:
            TypeError: If key or value is not bytes-like
            InvalidKeyLength: If key is empty, too long, or too short to
                reach a branch it must pass; the trie is left unchanged
        """
        key = _as_bytes(key, "key")
        value = _as_bytes(value, "value")
        self._check_key(key)

        if self.empty:
            self.root = Leaf(0, key, value)
            self.empty = False
            self._size = 1
            logger.debug(f"First key stored at root ({len(key)} bytes)")
            return

        self.root, created = nodes.insert(self.root, key, value)
        if created:
            self._size += 1

    def get(self, key: bytes, default: bytes | None = None) -> bytes | None:
        """Return the value stored under key, or default."""
        if self.empty:
            return default
        leaf = nodes.find(self.root, _as_bytes(key, "key"))
        return default if leaf is None else leaf.value

    def root_digest(self) -> bytes:
        """Merkle root of all stored values.

        An empty trie returns the primitive's digest of empty input.
        """
        if self.empty:
            return empty_digest(self.algorithm)
        return node_digest(self.root, self._hasher)

    def root_hex(self) -> str:
        """Merkle root as a hex string."""
        return self.root_digest().hex()

    def max_depth(self) -> int:
        """Deepest leaf level in bits; 0 when empty or holding one key."""
        if self.empty:
            return 0
        return nodes.max_leaf_level(self.root)

    def node_count(self) -> int:
        """Total nodes, internal nodes included; 0 when empty."""
        if self.empty:
            return 0
        return nodes.count_nodes(self.root)

    def items(self) -> Iterator[tuple[str, bytes, bytes]]:
        """Yield (branch path, key, value) in ascending key bit order."""
        if self.empty:
            return
        for path, leaf in nodes.walk_leaves(self.root):
            yield path, leaf.key, leaf.value

    def print(self, file: TextIO | None = None) -> None:
        """Write one line per key: branch path, key bits, value hex."""
        out = file if file is not None else sys.stdout
        for path, key, value in self.items():
            print(f"{path} {to_bit_string(key)} {value.hex()}", file=out)

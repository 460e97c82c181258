"""Trie nodes and the walks over them.

Nodes are a tagged variant: a Leaf holds a key and value and never has
children; an Internal node holds up to two children and no key/value.
A node at `level` branches on bit `bit_mask` of byte `key[byte_index]`,
reading keys most significant bit first.

Every walk is iterative. Depth is bounded by 8 * key length, which can
exceed the interpreter's recursion limit for long keys.
"""
import logging
from dataclasses import dataclass
from typing import Iterator

from ..core.constants import BITS_PER_BYTE, TOP_BIT_SHIFT
from ..core.errors import InvalidKeyLength

logger = logging.getLogger("merkletrie.trie")


def bit_at(key: bytes, level: int) -> int:
    """Return the bit (0 or 1) of key that a node at level branches on.

    Raises:
        InvalidKeyLength: If key has no byte for this level
    """
    byte_index = level // BITS_PER_BYTE
    if byte_index >= len(key):
        raise InvalidKeyLength(len(key), level)
    mask = 1 << (TOP_BIT_SHIFT - level % BITS_PER_BYTE)
    return 1 if key[byte_index] & mask else 0


def first_divergent_bit(a: bytes, b: bytes, start: int = 0) -> int:
    """First bit position >= start where keys a and b differ.

    b is read first, so a too-short b is the key reported.

    Raises:
        InvalidKeyLength: If either key runs out before they diverge
    """
    level = start
    while True:
        if bit_at(b, level) != bit_at(a, level):
            return level
        level += 1


@dataclass
class _Node:
    level: int

    @property
    def byte_index(self) -> int:
        return self.level // BITS_PER_BYTE

    @property
    def bit_mask(self) -> int:
        return 1 << (TOP_BIT_SHIFT - self.level % BITS_PER_BYTE)


@dataclass
class Leaf(_Node):
    """Node holding one key and its value."""

    key: bytes = b""
    value: bytes = b""

    is_leaf = True

    def children(self) -> list:
        return []


@dataclass
class Internal(_Node):
    """Branching node: left for a clear bit, right for a set bit."""

    left: "Leaf | Internal | None" = None
    right: "Leaf | Internal | None" = None

    is_leaf = False

    def child(self, bit: int) -> "Leaf | Internal | None":
        return self.right if bit else self.left

    def set_child(self, bit: int, node: "Leaf | Internal") -> None:
        if node.level != self.level + 1:
            raise ValueError(f"Child level {node.level} under parent level {self.level}")
        if bit:
            self.right = node
        else:
            self.left = node

    def children(self) -> list:
        return [c for c in (self.left, self.right) if c is not None]


Node = Leaf | Internal


@dataclass
class _Slot:
    """Where an insertion lands, found before anything is mutated."""

    parent: Internal | None
    bit: int
    node: Node | None
    divergence: int | None = None


def _locate(root: Node, key: bytes) -> _Slot:
    """Walk from root along key's bits without mutating.

    Reads every bit the insertion will need, so InvalidKeyLength is
    raised here or not at all.
    """
    parent = None
    bit = 0
    node = root

    while True:
        if node.is_leaf:
            if node.key == key:
                return _Slot(parent, bit, node)
            divergence = first_divergent_bit(node.key, key, node.level)
            return _Slot(parent, bit, node, divergence)

        bit = bit_at(key, node.level)
        child = node.child(bit)
        if child is None:
            return _Slot(node, bit, None)
        parent, node = node, child


def _demote(leaf: Leaf, key: bytes, value: bytes, divergence: int) -> Internal:
    """Build the subtree replacing leaf once key arrives at its position.

    Internal nodes run from leaf.level down to the divergent bit, where
    the old and new leaves sit side by side.
    """
    top = node = Internal(leaf.level)
    for level in range(leaf.level, divergence):
        nxt = Internal(level + 1)
        node.set_child(bit_at(key, level), nxt)
        node = nxt

    node.set_child(bit_at(leaf.key, divergence), Leaf(divergence + 1, leaf.key, leaf.value))
    node.set_child(bit_at(key, divergence), Leaf(divergence + 1, key, value))
    return top


def insert(root: Node, key: bytes, value: bytes) -> tuple[Node, bool]:
    """Insert key/value under a non-empty root.

    Args:
        root: Root node holding at least one leaf
        key: Key bytes
        value: Value bytes

    Returns:
        (root, created): root may be a new node when the old root leaf
        was demoted; created is False when an existing value was replaced

    Raises:
        InvalidKeyLength: If key is too short for the walk; tree unchanged
    """
    slot = _locate(root, key)

    if slot.node is None:
        slot.parent.set_child(slot.bit, Leaf(slot.parent.level + 1, key, value))
        return root, True

    if slot.divergence is None:
        logger.debug(f"Overwrote value at level {slot.node.level}")
        slot.node.value = value
        return root, False

    branch = _demote(slot.node, key, value, slot.divergence)
    logger.debug(
        f"Demoted leaf at level {slot.node.level}; keys diverge at bit {slot.divergence}"
    )
    if slot.parent is None:
        return branch, True
    slot.parent.set_child(slot.bit, branch)
    return root, True


def find(root: Node, key: bytes) -> Leaf | None:
    """Return the leaf holding key, or None."""
    node = root
    while node is not None:
        if node.is_leaf:
            return node if node.key == key else None
        if node.byte_index >= len(key):
            return None
        node = node.child(bit_at(key, node.level))
    return None


def max_leaf_level(root: Node) -> int:
    """Deepest leaf level under root; 0 if there are no leaves."""
    deepest = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            deepest = max(deepest, node.level)
        else:
            stack.extend(node.children())
    return deepest


def count_nodes(root: Node) -> int:
    """Total nodes under root, internal nodes included."""
    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.children())
    return total


def walk_leaves(root: Node) -> Iterator[tuple[str, Leaf]]:
    """Yield (branch path, leaf) depth first, left before right.

    The path is the string of '0'/'1' branch bits taken from root. The
    order is ascending bit order of keys.
    """
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            yield path, node
            continue
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))

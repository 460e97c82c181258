"""Bottom-up digest aggregation over trie nodes.

Leaf digest is H(value); the key is not mixed in. An internal node with
two children hashes H(left || right). An internal node with one child
passes that child's digest through unchanged. Changing either rule
changes every root ever produced.
"""
from .hash import Hasher


def node_digest(node, hasher: Hasher) -> bytes:
    """Compute the Merkle digest of the subtree rooted at node.

    Iterative post-order walk, so tree depth never touches the
    interpreter's recursion limit.

    Args:
        node: Leaf or Internal node
        hasher: Hash primitive (bytes -> digest)

    Returns:
        Digest bytes

    Raises:
        ValueError: If an internal node has no children
    """
    digests: list[bytes] = []
    stack = [(node, False)]

    while stack:
        current, ready = stack.pop()

        if current.is_leaf:
            digests.append(hasher(current.value))
            continue

        children = current.children()
        if not children:
            raise ValueError(f"Internal node at level {current.level} has no children")

        if not ready:
            stack.append((current, True))
            # Push right first so left is digested first
            stack.extend((child, False) for child in reversed(children))
            continue

        if len(children) == 2:
            right = digests.pop()
            left = digests.pop()
            digests.append(hasher(left + right))
        # One child: its digest is already on top of the stack

    return digests[0]

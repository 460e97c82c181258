"""Root verification.

Checks a trie's whole root digest against an expected value. This is
not an inclusion proof; it only detects that something changed.
"""
import hmac


def verify_root(trie, expected: bytes | str) -> bool:
    """Compare trie.root_digest() to expected in constant time.

    Args:
        trie: MerkleTrie to check
        expected: Digest bytes or hex string

    Returns:
        True if the digests match, False otherwise

    Raises:
        ValueError: If expected is a string that is not valid hex
    """
    if isinstance(expected, str):
        expected = bytes.fromhex(expected.strip())
    return hmac.compare_digest(trie.root_digest(), expected)

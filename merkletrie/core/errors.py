"""Error taxonomy for trie operations.

Re-inserting an existing key is not an error: it replaces the value.
"""


class TrieError(Exception):
    """Base class for trie errors."""
    pass


class InvalidKeyLength(TrieError, ValueError):
    """Raised when a key cannot address the bit a walk needs.

    Covers empty keys, keys shorter than the branch depth they must reach,
    and keys over the configured max_key_bytes.

    Attributes:
        key_length: Length of the offending key in bytes
        level: Bit position that could not be read, or None
    """

    def __init__(self, key_length: int, level: int | None = None, message: str | None = None):
        self.key_length = key_length
        self.level = level
        if message is None:
            if level is None:
                message = f"Invalid key length {key_length}"
            else:
                message = (
                    f"Key of {key_length} bytes cannot reach bit {level} "
                    f"(needs at least {level // 8 + 1} bytes)"
                )
        super().__init__(message)

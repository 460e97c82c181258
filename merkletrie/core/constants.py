"""merkletrie constants.

All magic numbers live here. No exceptions.
"""

# Bit addressing
BITS_PER_BYTE = 8
TOP_BIT_SHIFT = 7  # MSB-first: level 0 reads 1 << 7 of byte 0

# Hash primitives
DEFAULT_HASH_ALGORITHM = "sha256"

# Key limits
MAX_KEY_BYTES_UNLIMITED = 0

# Configuration
ENV_PREFIX = "MERKLETRIE_"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TENANT_ID = "default"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


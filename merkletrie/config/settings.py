"""merkletrie configuration.

All settings can be overridden via environment variables with the
MERKLETRIE_ prefix.
"""
import os
from dataclasses import dataclass

from ..anchor.hash import HASHERS
from ..core.constants import (
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TENANT_ID,
    ENV_PREFIX,
    LOG_LEVELS,
    MAX_KEY_BYTES_UNLIMITED,
)
from ..core.receipt import StopRule


@dataclass
class TrieConfig:
    """Trie and tooling configuration."""

    # Hashing
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    # Key limits (0 = unlimited)
    max_key_bytes: int = MAX_KEY_BYTES_UNLIMITED

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL

    # Receipts
    tenant_id: str = DEFAULT_TENANT_ID

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "TrieConfig":
        """Load configuration from environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        if f"{ENV_PREFIX}HASH_ALGORITHM" in env:
            config.hash_algorithm = env[f"{ENV_PREFIX}HASH_ALGORITHM"].strip().lower()
        if f"{ENV_PREFIX}MAX_KEY_BYTES" in env:
            config.max_key_bytes = int(env[f"{ENV_PREFIX}MAX_KEY_BYTES"])
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            config.log_level = env[f"{ENV_PREFIX}LOG_LEVEL"].strip().upper()
        if f"{ENV_PREFIX}TENANT_ID" in env:
            config.tenant_id = env[f"{ENV_PREFIX}TENANT_ID"]

        return config

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []

        if self.hash_algorithm not in HASHERS:
            errors.append(f"Unknown hash_algorithm: {self.hash_algorithm}")

        if self.max_key_bytes < 0:
            errors.append(f"max_key_bytes must be >= 0, got {self.max_key_bytes}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Invalid log_level: {self.log_level}")

        if not self.tenant_id:
            errors.append("tenant_id must not be empty")

        return errors


def load_config(environ: dict | None = None) -> TrieConfig:
    """Load and validate configuration from the environment.

    Raises:
        StopRule: If any setting is invalid
    """
    config = TrieConfig.from_env(environ)
    errors = config.validate()
    if errors:
        raise StopRule("Invalid configuration: " + "; ".join(errors))
    return config

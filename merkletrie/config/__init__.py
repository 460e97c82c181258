"""Configuration subpackage."""
from .settings import TrieConfig, load_config

__all__ = ["TrieConfig", "load_config"]

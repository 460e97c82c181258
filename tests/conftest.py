"""Pytest fixtures for merkletrie tests."""
import os
import random

import pytest

from merkletrie.trie import MerkleTrie


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any MERKLETRIE_* variables from the outer environment."""
    for name in list(os.environ):
        if name.startswith("MERKLETRIE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def trie():
    """Provide an empty sha256 MerkleTrie."""
    return MerkleTrie()


@pytest.fixture
def sample_pairs():
    """Provide 8 two-byte keys with distinct values."""
    keys = [0x0000, 0x0001, 0x00F0, 0x1234, 0x8000, 0x8001, 0xC0DE, 0xFFFF]
    return [(k.to_bytes(2, "big"), f"value_{i}".encode()) for i, k in enumerate(keys)]


@pytest.fixture
def random_pairs():
    """Provide 64 distinct random 4-byte keys with values, seeded."""
    rng = random.Random(1234)
    keys = set()
    while len(keys) < 64:
        keys.add(rng.getrandbits(32).to_bytes(4, "big"))
    return [(k, k[::-1] + b"v") for k in sorted(keys)]


@pytest.fixture
def pairs_file(tmp_path, sample_pairs):
    """Write sample_pairs as a JSONL file and return its path."""
    path = tmp_path / "pairs.jsonl"
    lines = [
        '{"key": "%s", "value": "%s"}' % (k.hex(), v.hex())
        for k, v in sample_pairs
    ]
    path.write_text("\n".join(lines) + "\n\n")
    return path

"""Tests for merkletrie.core: receipts and errors."""
import json

import pytest

from merkletrie.core import InvalidKeyLength, StopRule, TrieError, dual_hash, emit_receipt


class TestDualHash:
    """Tests for dual_hash function."""

    def test_dual_hash_format(self):
        """Output contains ':' separator, both parts are 64 hex chars."""
        parts = dual_hash(b"test").split(":")
        assert len(parts) == 2
        assert len(parts[0]) == 64
        assert len(parts[1]) == 64
        int(parts[0], 16)
        int(parts[1], 16)

    def test_dual_hash_parts_differ(self):
        """SHA256 and BLAKE3 halves are different digests."""
        sha_part, blake_part = dual_hash(b"test").split(":")
        assert sha_part != blake_part

    def test_dual_hash_inputs(self):
        """str and dict inputs are normalized before hashing."""
        assert dual_hash("test") == dual_hash(b"test")
        assert dual_hash({"b": 1, "a": 2}) == dual_hash({"a": 2, "b": 1})


class TestEmitReceipt:
    """Tests for emit_receipt function."""

    def test_emit_receipt_fields(self, capsys):
        """Output has receipt_type, ts, tenant_id, payload_hash."""
        result = emit_receipt("anchor", {"merkle_root": "ab"})
        for field in ("receipt_type", "ts", "tenant_id", "payload_hash"):
            assert field in result
        assert result["tenant_id"] == "default"
        assert result["merkle_root"] == "ab"

    def test_emit_receipt_prints_json(self, capsys):
        """Receipt is printed as one JSON line."""
        result = emit_receipt("anchor", {"merkle_root": "ab"}, tenant_id="t1")
        printed = json.loads(capsys.readouterr().out.strip())
        assert printed == result
        assert printed["tenant_id"] == "t1"

    def test_payload_hash_deterministic(self, capsys):
        """payload_hash depends only on the data."""
        a = emit_receipt("anchor", {"x": 1})
        b = emit_receipt("anchor", {"x": 1})
        assert a["payload_hash"] == b["payload_hash"]


class TestErrors:
    """Tests for the error taxonomy."""

    def test_invalid_key_length_hierarchy(self):
        """InvalidKeyLength is a TrieError and a ValueError."""
        err = InvalidKeyLength(1, 8)
        assert isinstance(err, TrieError)
        assert isinstance(err, ValueError)
        assert "bit 8" in str(err)
        assert "2 bytes" in str(err)

    def test_invalid_key_length_custom_message(self):
        """A custom message replaces the default."""
        err = InvalidKeyLength(0, message="Key must not be empty")
        assert str(err) == "Key must not be empty"
        assert err.level is None

    def test_stoprule_is_exception(self):
        """StopRule can be raised and caught explicitly."""
        with pytest.raises(StopRule):
            raise StopRule("halt")

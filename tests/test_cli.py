"""Tests for the merkletrie command-line tooling."""
import hashlib
import json

import pytest
from click.testing import CliRunner

from merkletrie import MerkleTrie
from merkletrie_cli.main import cli
from merkletrie_cli.trie_cmd import load_pairs, parse_pair


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def expected_root(sample_pairs):
    trie = MerkleTrie()
    for key, value in sample_pairs:
        trie.insert(key, value)
    return trie.root_hex()


class TestInputParsing:
    """Tests for parse_pair and load_pairs."""

    def test_parse_pair(self):
        """KEYHEX=VALUEHEX becomes bytes."""
        assert parse_pair("00ff=beef") == (b"\x00\xff", b"\xbe\xef")

    def test_parse_pair_missing_separator(self):
        """Pairs need an '=' separator."""
        with pytest.raises(ValueError):
            parse_pair("00ff")

    def test_load_pairs_file_and_inline(self, pairs_file, sample_pairs):
        """File records come first, then inline pairs."""
        pairs = load_pairs(str(pairs_file), ("abcd=01",))
        assert pairs[:-1] == sample_pairs
        assert pairs[-1] == (b"\xab\xcd", b"\x01")

    def test_load_pairs_bad_record(self, tmp_path):
        """Bad JSONL records name the file and line."""
        path = tmp_path / "bad.jsonl"
        path.write_text('{"key": "00", "value": "01"}\n{"key": "zz", "value": "01"}\n')
        with pytest.raises(ValueError, match="bad.jsonl:2"):
            load_pairs(str(path), ())


class TestRootCommand:
    """Tests for `merkletrie root`."""

    def test_root_matches_library(self, runner, pairs_file, expected_root):
        """CLI root equals the library root."""
        result = runner.invoke(cli, ["root", "--items", str(pairs_file)])
        assert result.exit_code == 0, result.output
        assert "Merkle Root" in result.output
        assert expected_root[:40] in result.output

    def test_root_receipt(self, runner, pairs_file, expected_root):
        """--receipt emits an anchor receipt with the full root."""
        result = runner.invoke(cli, ["root", "--items", str(pairs_file), "--receipt"])
        assert result.exit_code == 0, result.output
        receipt = json.loads(result.output.strip().splitlines()[-1])
        assert receipt["receipt_type"] == "anchor"
        assert receipt["merkle_root"] == expected_root
        assert receipt["key_count"] == 8
        assert receipt["hash_algorithm"] == "sha256"

    def test_root_empty_input(self, runner):
        """No pairs gives the empty digest."""
        result = runner.invoke(cli, ["root", "--receipt"])
        assert result.exit_code == 0, result.output
        receipt = json.loads(result.output.strip().splitlines()[-1])
        assert receipt["merkle_root"] == hashlib.sha256(b"").hexdigest()

    def test_root_algorithm_from_env(self, runner, monkeypatch):
        """MERKLETRIE_HASH_ALGORITHM selects the primitive."""
        monkeypatch.setenv("MERKLETRIE_HASH_ALGORITHM", "blake3")
        result = runner.invoke(cli, ["root", "--pair", "00=61", "--receipt"])
        assert result.exit_code == 0, result.output
        receipt = json.loads(result.output.strip().splitlines()[-1])
        assert receipt["hash_algorithm"] == "blake3"

    def test_root_short_key_error(self, runner):
        """A key too short for the tree exits 2."""
        result = runner.invoke(cli, ["root", "--pair", "0000=aa", "--pair", "0001=bb",
                                     "--pair", "00=cc"])
        assert result.exit_code == 2
        assert "Input: ERROR" in result.output

    def test_invalid_config(self, runner, monkeypatch):
        """Invalid configuration exits 2 before running commands."""
        monkeypatch.setenv("MERKLETRIE_LOG_LEVEL", "LOUD")
        result = runner.invoke(cli, ["root"])
        assert result.exit_code == 2
        assert "Config: ERROR" in result.output


class TestOtherCommands:
    """Tests for depth, dump and verify."""

    def test_depth(self, runner):
        """depth prints the max leaf level."""
        result = runner.invoke(cli, ["depth", "--pair", "0000=aa", "--pair", "0001=bb"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "16"

    def test_dump(self, runner):
        """dump lists keys in ascending order."""
        result = runner.invoke(cli, ["dump", "--pair", "80=bb", "--pair", "00=aa"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["0 00000000 aa", "1 10000000 bb"]

    def test_verify_valid(self, runner, pairs_file, expected_root):
        """Matching root exits 0."""
        result = runner.invoke(cli, ["verify", "--items", str(pairs_file), "--root", expected_root])
        assert result.exit_code == 0, result.output
        assert "VALID" in result.output

    def test_verify_mismatch(self, runner, pairs_file):
        """Mismatching root exits 1."""
        result = runner.invoke(cli, ["verify", "--items", str(pairs_file), "--root", "00" * 32])
        assert result.exit_code == 1
        assert "MISMATCH" in result.output

    def test_verify_bad_hex(self, runner, pairs_file):
        """Unparseable root exits 2."""
        result = runner.invoke(cli, ["verify", "--items", str(pairs_file), "--root", "zz"])
        assert result.exit_code == 2

    def test_version(self, runner):
        """--version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

"""Trie commands: root, depth, dump, verify."""
import json
import logging
import sys
import time
from functools import wraps

import click

from merkletrie.anchor.hash import HASHERS
from merkletrie.anchor.verify import verify_root
from merkletrie.core.errors import TrieError
from merkletrie.core.receipt import emit_receipt
from merkletrie.trie import MerkleTrie

from .output import error_box, success_box

logger = logging.getLogger("merkletrie.cli")


def parse_pair(text: str) -> tuple[bytes, bytes]:
    """Parse 'KEYHEX=VALUEHEX' into (key, value) bytes."""
    if "=" not in text:
        raise ValueError(f"Pair {text!r} is not KEYHEX=VALUEHEX")
    key_hex, value_hex = text.split("=", 1)
    return bytes.fromhex(key_hex), bytes.fromhex(value_hex)


def load_pairs(items: str | None, pairs: tuple) -> list[tuple[bytes, bytes]]:
    """Collect (key, value) pairs from a JSONL file and inline options.

    Each JSONL line is {"key": "<hex>", "value": "<hex>"}. Blank lines are
    skipped.
    """
    collected = []
    if items:
        with open(items) as f:
            for lineno, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    record = json.loads(line)
                    collected.append((bytes.fromhex(record["key"]), bytes.fromhex(record["value"])))
                except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                    raise ValueError(f"{items}:{lineno}: bad record ({e})") from e
    for text in pairs:
        collected.append(parse_pair(text))
    return collected


def build_trie(items: str | None, pairs: tuple, algorithm: str, max_key_bytes: int) -> MerkleTrie:
    """Build a trie from CLI input, inserting in input order."""
    trie = MerkleTrie(algorithm=algorithm, max_key_bytes=max_key_bytes)
    for key, value in load_pairs(items, pairs):
        trie.insert(key, value)
    logger.info(f"Built trie with {len(trie)} keys")
    return trie


def trie_input(f):
    """Shared input options; passes a built MerkleTrie as `trie`."""
    @click.option('--items', type=click.Path(exists=True, dir_okay=False),
                  help='JSONL file of {"key": hex, "value": hex} records')
    @click.option('--pair', 'pairs', multiple=True, help='Inline KEYHEX=VALUEHEX pair')
    @click.option('--algorithm', type=click.Choice(sorted(HASHERS)), default=None,
                  help='Hash primitive (default from MERKLETRIE_HASH_ALGORITHM)')
    @click.pass_obj
    @wraps(f)
    def wrapper(config, items, pairs, algorithm, **kwargs):
        try:
            trie = build_trie(items, pairs, algorithm or config.hash_algorithm,
                              config.max_key_bytes)
        except (OSError, ValueError, TrieError) as e:
            error_box("Input: ERROR", str(e))
            sys.exit(2)
        return f(config, trie, **kwargs)
    return wrapper


@click.command()
@trie_input
@click.option('--receipt', is_flag=True, help='Also emit an anchor receipt as JSON')
def root(config, trie: MerkleTrie, receipt: bool):
    """Compute the Merkle root of the input pairs."""
    t0 = time.perf_counter()
    digest = trie.root_hex()
    depth = trie.max_depth()
    elapsed_ms = int((time.perf_counter() - t0) * 1000)

    success_box("Merkle Root", [
        ("Keys", str(len(trie))),
        ("Algorithm", trie.algorithm),
        ("Max depth", str(depth)),
        ("Root", digest),
        ("Duration", f"{elapsed_ms}ms"),
    ], f"merkletrie verify --root {digest[:16]}...")

    if receipt:
        emit_receipt("anchor", {
            "merkle_root": digest,
            "hash_algorithm": trie.algorithm,
            "key_count": len(trie),
            "max_depth": depth,
        }, tenant_id=config.tenant_id)


@click.command()
@trie_input
def depth(config, trie: MerkleTrie):
    """Print the maximum leaf depth in bits."""
    click.echo(str(trie.max_depth()))


@click.command()
@trie_input
def dump(config, trie: MerkleTrie):
    """List every key: branch path, key bits, value hex."""
    trie.print()


@click.command()
@trie_input
@click.option('--root', 'expected', required=True, help='Expected Merkle root (hex)')
def verify(config, trie: MerkleTrie, expected: str):
    """Check the input pairs against an expected Merkle root."""
    try:
        valid = verify_root(trie, expected)
    except ValueError as e:
        error_box("Verify: ERROR", f"Bad root: {e}")
        sys.exit(2)

    if valid:
        success_box("Verify: VALID", [
            ("Keys", str(len(trie))),
            ("Root", trie.root_hex()),
        ])
        sys.exit(0)

    error_box("Verify: MISMATCH", f"Computed {trie.root_hex()}")
    sys.exit(1)

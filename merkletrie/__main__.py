"""
Entry point for running merkletrie as a module.

Usage:
    python -m merkletrie [command] [options]

Example:
    python -m merkletrie root --items pairs.jsonl
    python -m merkletrie dump --pair 00=aa --pair 80=bb
"""

from merkletrie_cli.main import cli

if __name__ == "__main__":
    cli()

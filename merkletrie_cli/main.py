"""merkletrie CLI entry point - assembles all commands."""
import logging
import sys

import click

from merkletrie.config import load_config
from merkletrie.core.receipt import StopRule

from . import __version__
from .output import error_box
from .trie_cmd import depth, dump, root, verify


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """merkletrie: binary trie with a Merkle root."""
    try:
        config = load_config()
    except (StopRule, ValueError) as e:
        error_box("Config: ERROR", str(e))
        sys.exit(2)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = config


cli.add_command(root)
cli.add_command(depth)
cli.add_command(dump)
cli.add_command(verify)


if __name__ == "__main__":
    cli()

"""merkletrie command-line tooling."""
from merkletrie import __version__

__all__ = ["__version__"]

"""Errors that distinguish a wrapped cause from an earlier, triggering failure."""

from .core import (
    ChainedError,
    Constituent,
    Previous,
    downcast,
    dump,
    source_of,
    walk,
)

__version__ = "0.1.0"

__all__ = [
    "ChainedError",
    "Constituent",
    "Previous",
    "downcast",
    "dump",
    "source_of",
    "walk",
    "__version__",
]

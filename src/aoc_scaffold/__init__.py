"""
Core package for scaffolding per-day Advent of Code solution crates.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("aoc-scaffold")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]

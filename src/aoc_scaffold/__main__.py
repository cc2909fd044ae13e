"""
Module entry-point so the package can be executed via `python -m aoc_scaffold`.
"""

from .cli import main


if __name__ == "__main__":  # pragma: no cover
    main()

"""
Pydantic models describing a single scaffolding invocation.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class ConfigError(RuntimeError):
    """Raised when required settings are missing or unusable."""


class ScaffoldRequest(BaseModel):
    """
    Parameters for scaffolding one puzzle day.

    Attributes:
        target_dir: Directory that will hold the generated crate.
        library_dir: Path to the shared support library, as referenced from the crate.
        year: Puzzle year (e.g. 2022).
        day: Puzzle day (1-25).
        force: Overwrite files when the target directory already exists.
    """
    target_dir: Path
    library_dir: Path
    year: int
    day: int
    force: bool = False

    model_config = {
        "frozen": True,
    }

    @classmethod
    def for_day(cls, year: int, day: int, **overrides) -> "ScaffoldRequest":
        """Build a request using the default `<year>_<day>` target and `../aoc` library."""
        values = {
            "target_dir": default_target_dir(year, day),
            "library_dir": Path("../aoc"),
            "year": year,
            "day": day,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


def default_target_dir(year: int, day: int) -> Path:
    return Path(f"{year}_{day:02d}")

"""
Filesystem helpers shared across scaffolding modules.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> bool:
    """
    Ensure a directory exists (including parents).

    Returns:
        True if the directory had to be created.
    """
    target = Path(path)
    if target.is_dir():
        return False
    target.mkdir(parents=True, exist_ok=True)
    return True


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text to a file whose parent directory already exists.

    New files get the process umask mode; existing files keep their mode.
    """
    target = Path(path)
    logger.info("Writing file %s ...", target)
    # newline="" disables newline translation
    with target.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return target

"""
Create the directory and files for one puzzle crate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Dict, Iterable, List, Tuple

from ..api import InputProvider
from ..util import ensure_directory, write_text_file
from .templates import CARGO_TOML, GITIGNORE, LIB_RS, MAIN_RS, render_template

logger = logging.getLogger(__name__)

INPUT_FILENAME = "input.txt"
SRC_DIRNAME = "src"

# (relative path, template) in the order they are written after input.txt
TEMPLATE_FILES: Tuple[Tuple[str, str], ...] = (
    (".gitignore", GITIGNORE),
    ("Cargo.toml", CARGO_TOML),
    (f"{SRC_DIRNAME}/main.rs", MAIN_RS),
    (f"{SRC_DIRNAME}/lib.rs", LIB_RS),
)


class ScaffoldError(RuntimeError):
    """Raised when a crate cannot be scaffolded."""


class TargetExistsError(ScaffoldError):
    """Raised when the target directory exists and overwriting was not requested."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"The target directory '{path}' exists. Use the --force option to overwrite.")


@dataclass
class ScaffoldReport:
    """
    Stores what changed when scaffolding ran.

    Attributes:
        root: The target directory of the crate.
        directories_created: Newly created folders.
        files_written: Files written, in write order.
    """
    root: Path
    directories_created: List[Path] = field(default_factory=list)
    files_written: List[Path] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Files written", str(len(self.files_written)))
        for path in self.files_written:
            yield ("File", str(path.relative_to(self.root).as_posix()))


def _library_path_text(library_dir: Path | str) -> str:
    # TOML basic strings treat backslashes as escapes, so always use forward slashes
    text = PurePath(library_dir).as_posix()
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ScaffoldError(f"Can't convert library path {library_dir!r} to text") from exc
    return text


def build_variables(library_dir: Path | str, year: int, day: int) -> Dict[str, object]:
    """Placeholder bindings shared by all templates."""
    return {
        "AOC_PATH": _library_path_text(library_dir),
        "YEAR": year,
        "DAY": day,
    }


def plan_files(target_dir: Path | str) -> List[Path]:
    """Return the files `write_files` creates below `target_dir`, in write order."""
    root = Path(target_dir)
    return [root / INPUT_FILENAME] + [root / relative for relative, _ in TEMPLATE_FILES]


def write_files(
    target_dir: Path | str,
    library_dir: Path | str,
    input_provider: InputProvider,
    year: int,
    day: int,
    force: bool = False,
) -> ScaffoldReport:
    """
    Scaffold the crate for one puzzle day.

    Creates `target_dir/src`, downloads the input through `input_provider` into
    `input.txt` and renders `.gitignore`, `Cargo.toml`, `src/main.rs` and
    `src/lib.rs`. Nothing is rolled back when a step fails.

    Args:
        target_dir: Directory for the crate.
        library_dir: Path of the support library as seen from the crate.
        input_provider: Source of the puzzle input.
        year: Puzzle year.
        day: Puzzle day.
        force: Overwrite an existing target directory.

    Returns:
        A ScaffoldReport detailing the actions taken.

    Raises:
        TargetExistsError: The target exists and `force` is False.
        ScaffoldError: The library path cannot be expressed as text.
        InputError: The input provider failed.
        OSError: A directory or file could not be written.
    """
    variables = build_variables(library_dir, year, day)
    root = Path(target_dir)

    if root.exists() and not force:
        raise TargetExistsError(root)

    report = ScaffoldReport(root=root)
    src_path = root / SRC_DIRNAME
    logger.info("Creating directories for %s", src_path)
    for directory in (root, src_path):
        if ensure_directory(directory):
            report.directories_created.append(directory)

    # input is written verbatim, placeholders inside it stay as they are
    content = input_provider.load_input(year, day)
    report.files_written.append(write_text_file(root / INPUT_FILENAME, content))

    for relative, template in TEMPLATE_FILES:
        target = root / relative
        report.files_written.append(write_text_file(target, render_template(template, variables)))

    return report

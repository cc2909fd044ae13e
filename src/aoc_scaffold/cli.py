"""
Command line interface for scaffolding Advent of Code puzzle crates.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .api import InputError, InputLoader
from .config import ConfigError, ScaffoldRequest, require_session
from .scaffold import ScaffoldError, ScaffoldReport, plan_files, write_files
from .util import write_text_file

console = Console()
app = typer.Typer(help="Create per-day Advent of Code solution crates.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("AOC_SCAFFOLD_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _session_or_exit(session: Optional[str]) -> str:
    try:
        return require_session(session)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show aoc-scaffold version and exit.",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]aoc-scaffold[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]aoc-scaffold[/] is ready. Run [cyan]aoc-scaffold new --year 2022 --day 1[/] "
            "to create a crate.",
        )


@app.command()
def new(
    year: int = typer.Option(..., "--year", "-y", help="Puzzle year."),
    day: int = typer.Option(..., "--day", "-d", help="Puzzle day."),
    target: Optional[Path] = typer.Option(
        None,
        "--target",
        "-t",
        help="Directory for the new crate (defaults to <year>_<day>).",
    ),
    lib: Optional[Path] = typer.Option(
        None,
        "--lib",
        "-l",
        help="Path to the support library, relative to the new crate (defaults to ../aoc).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite files if the target directory already exists.",
    ),
    session: Optional[str] = typer.Option(
        None,
        "--session",
        "-s",
        help="adventofcode.com session cookie (defaults to AOC_SESSION).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show the files that would be created without touching the filesystem or network.",
    ),
) -> None:
    """
    Create the directory, input file and source stubs for one puzzle day.
    """
    request = ScaffoldRequest.for_day(year, day, target_dir=target, library_dir=lib, force=force)

    if dry_run:
        table = Table(title="Scaffold Plan")
        table.add_column("File", overflow="fold")
        for path in plan_files(request.target_dir):
            table.add_row(str(path))
        console.print(table)
        if request.target_dir.exists() and not request.force:
            console.print(f"[yellow]{request.target_dir} already exists; --force would be required.[/]")
        console.print("[bold blue]Dry run complete.[/] No filesystem changes made.")
        return

    loader = InputLoader(session=_session_or_exit(session))
    logger.info("Scaffolding %s/%s into %s", request.year, request.day, request.target_dir)
    try:
        report = write_files(
            request.target_dir,
            request.library_dir,
            loader,
            request.year,
            request.day,
            request.force,
        )
    except (ScaffoldError, InputError, OSError) as exc:
        console.print(f"[bold red]Scaffolding failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(report)
    console.print("[bold green]Crate ready.[/]")


@app.command("input")
def input_command(
    year: int = typer.Option(..., "--year", "-y", help="Puzzle year."),
    day: int = typer.Option(..., "--day", "-d", help="Puzzle day."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the input to this file instead of stdout.",
    ),
    session: Optional[str] = typer.Option(
        None,
        "--session",
        "-s",
        help="adventofcode.com session cookie (defaults to AOC_SESSION).",
    ),
) -> None:
    """
    Download the puzzle input for one day without scaffolding a crate.
    """
    loader = InputLoader(session=_session_or_exit(session))
    try:
        content = loader.load_input(year, day)
        if output is not None:
            write_text_file(output, content)
    except (InputError, OSError) as exc:
        console.print(f"[bold red]Download failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(content, nl=False)
    else:
        console.print(f"[green]Input written to {output}[/]")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()

"""
Crate scaffolding: templates and the file writer.
"""

from .files import ScaffoldError, ScaffoldReport, TargetExistsError, plan_files, write_files
from .templates import CARGO_TOML, GITIGNORE, LIB_RS, MAIN_RS, render_template

__all__ = [
    "CARGO_TOML",
    "GITIGNORE",
    "LIB_RS",
    "MAIN_RS",
    "ScaffoldError",
    "ScaffoldReport",
    "TargetExistsError",
    "plan_files",
    "render_template",
    "write_files",
]

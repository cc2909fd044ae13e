"""
Static file templates for a single puzzle crate and the placeholder renderer.

Placeholders use the `{NAME}` form. The braces in Rust and TOML syntax (`{}`,
`{:?}`, `{ path = ... }`) never match a placeholder because a placeholder name
must directly follow the opening brace and consist of identifier characters.
"""

from __future__ import annotations

import re
from typing import Mapping

_PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")
_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def render_template(template: str, variables: Mapping[str, object]) -> str:
    """
    Replace `{NAME}` placeholders with the string form of the bound values.

    Substitution is a single pass over the template, so the result does not
    depend on the order of `variables` and a value that happens to look like a
    placeholder is inserted literally. Placeholders without a binding are left
    untouched.

    Args:
        template: Template text.
        variables: Mapping of placeholder name to value.

    Returns:
        The rendered text.

    Raises:
        ValueError: If a variable name is not a valid placeholder name.
    """
    for name in variables:
        if not _NAME_PATTERN.fullmatch(name):
            raise ValueError(f"Invalid placeholder name: {name!r}")

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return str(variables[name])

    return _PLACEHOLDER_PATTERN.sub(_replace, template)


MAIN_RS = """use mr_kaffee_aoc::{err::PuzzleError, GenericPuzzle};
use mr_kaffee_{YEAR}_{DAY}::*;

fn main() -> Result<(), PuzzleError> {
    puzzle().solve_report_err()
}
"""

LIB_RS = """use mr_kaffee_aoc::{Puzzle, Star};
use input::*;

/// the puzzle
pub fn puzzle() -> Puzzle<PuzzleData, usize, usize, usize, usize> {
    Puzzle {
        year: {YEAR},
        day: {DAY},
        input: include_str!("../input.txt"),
        star1: Some(Star {
            name: "Star 1",
            f: &star_1,
            exp: None,
        }),
        star2: Some(Star {
            name: "Star 2",
            f: &star_2,
            exp: None,
        }),
    }
}

pub mod input {
    use core::fmt;
    use std::{convert::Infallible, str::FromStr};

    #[derive(Debug)]
    pub struct PuzzleData {
        input: String,
    }

    impl FromStr for PuzzleData {
        type Err = Infallible;

        /// parse the puzzle input
        ///
        /// # Examples
        /// ```
        /// # use mr_kaffee_{YEAR}_{DAY}::input::*;
        /// let data = "Hello World".parse::<PuzzleData>().unwrap();
        /// assert_eq!("Hello World", format!("{}", data));
        /// ```    
        fn from_str(s: &str) -> Result<Self, Self::Err> {
            Ok(PuzzleData { input: s.into() })
        }
    }

    impl fmt::Display for PuzzleData {
        fn fmt(&self, f: &mut fmt::Formatter<'_>) -> fmt::Result {
            self.input.fmt(f)
        }
    }
}

pub fn star_1(data: &PuzzleData) -> usize {
    println!("{}", data);
    0
}

pub fn star_2(data: &PuzzleData) -> usize {
    println!("{:?}", data);
    0
}

#[cfg(test)]
mod tests {
    use super::*;
    use mr_kaffee_aoc::err::PuzzleError;

    const CONTENT: &str = r#"Hello World!
Freedom"#;

    #[test]
    pub fn test_puzzle_data_from_str() -> Result<(), PuzzleError> {
        let data = CONTENT.parse::<PuzzleData>()?;
        assert_eq!(format!("{}", data), CONTENT.to_string());
        Ok(())
    }
}
"""

CARGO_TOML = """[package]
name = "mr-kaffee-{YEAR}-{DAY}"
version = "0.1.0"
edition = "2021"

# See more keys and their definitions at https://doc.rust-lang.org/cargo/reference/manifest.html

[dependencies]

mr-kaffee-aoc = { path = "{AOC_PATH}" }
"""

GITIGNORE = """**/target
"""

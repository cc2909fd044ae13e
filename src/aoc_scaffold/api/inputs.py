"""
Download puzzle inputs from adventofcode.com (or fake them for tests).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import requests

from .. import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://adventofcode.com"
INPUT_URL_TEMPLATE = "{base_url}/{year}/day/{day}/input"
USER_AGENT = f"aoc-scaffold/{__version__}"


class InputError(RuntimeError):
    """Raised when a puzzle input cannot be retrieved."""


class InputProvider(Protocol):
    """Anything that can supply the puzzle input for a year and day."""

    def load_input(self, year: int, day: int) -> str:
        ...


@dataclass
class InputLoader:
    """
    Fetch puzzle inputs over HTTP using a logged-in session cookie.

    Attributes:
        session: Value of the `session` cookie.
        timeout: Seconds to wait for the server (requests' connect/read timeout).
        base_url: Site root, overridable for mirrors and tests.
    """
    session: str
    timeout: float = 30.0
    base_url: str = DEFAULT_BASE_URL

    def url_for(self, year: int, day: int) -> str:
        return INPUT_URL_TEMPLATE.format(base_url=self.base_url.rstrip("/"), year=year, day=day)

    def load_input(self, year: int, day: int) -> str:
        """
        Download the input for one puzzle.

        A single attempt is made. Transport failures, HTTP error statuses (an
        expired or invalid session is answered with 400) and undecodable bodies
        are raised as InputError.
        """
        url = self.url_for(year, day)
        headers = {
            "Cookie": f"session={self.session}",
            "User-Agent": USER_AGENT,
        }
        logger.info("Downloading input for %s/%s from %s", year, day, url)
        try:
            resp = requests.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise InputError(f"Failed to download input for {year}/{day}: {exc}") from exc

        try:
            text = resp.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputError(f"Input for {year}/{day} is not valid text: {exc}") from exc
        logger.debug("Received %d characters for %s/%s", len(text), year, day)
        return text


class StaticInputProvider:
    """Deterministic provider used where no network access is wanted."""

    def load_input(self, year: int, day: int) -> str:
        return f"Test input for {year}/{day}\n"

"""
Settings/secret loading helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .models import ConfigError


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Secrets(BaseModel):
    """
    Container for credentials loaded from environment variables.

    Attributes:
        aoc_session: Value of the adventofcode.com `session` cookie.
    """
    aoc_session: Optional[str] = Field(default=None, alias="AOC_SESSION")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_secrets() -> Secrets:
    """
    Load secrets from environment/.env exactly once.

    Returns:
        A Secrets object populated from environment variables.
    """
    values = {field.alias: os.getenv(field.alias) for field in Secrets.model_fields.values()}
    return Secrets(**values)


def require_session(explicit: Optional[str] = None) -> str:
    """Return the explicit session token, or the configured one, or fail."""
    token = (explicit or get_secrets().aoc_session or "").strip()
    if not token:
        raise ConfigError(
            "No session token available. Pass --session or set AOC_SESSION in the environment or .env."
        )
    return token

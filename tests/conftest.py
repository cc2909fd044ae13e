from pathlib import Path

import pytest
from typer.testing import CliRunner

from aoc_scaffold.api import StaticInputProvider
from aoc_scaffold.config import settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def provider() -> StaticInputProvider:
    return StaticInputProvider()


@pytest.fixture(autouse=True)
def _fresh_secrets():
    """
    Secrets are cached per process; drop the cache around each test.
    """
    settings.get_secrets.cache_clear()
    yield
    settings.get_secrets.cache_clear()


def _snapshot_tree(root: Path) -> dict:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot_tree():
    """
    Return a helper mapping every file below a root (relative posix path) to its bytes.
    """
    return _snapshot_tree

"""Shared pytest fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
import structlog


FIXTURES_DIR = Path(__file__).parent / "fixtures" / "config"


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Drop logging configuration that a test bound to its own streams."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample config files."""
    return FIXTURES_DIR

"""Shared pytest fixtures for wedbook tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI calls ``configure_logging`` which replaces the root handlers.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    wedbook_logger = logging.getLogger("wedbook")
    wedbook_level = wedbook_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    wedbook_logger.setLevel(wedbook_level)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no wedbook env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` so config
    discovery never picks up a stray ``wedbook.toml``.
    """
    monkeypatch.chdir(tmp_path)
    for var in (
        "WEDBOOK_CONFIG",
        "WEDBOOK_JSON_OUTPUT",
        "WEDBOOK_QUIET",
        "WEDBOOK_VERBOSE",
        "WEDBOOK_LOG_JSON",
        "WEDBOOK_OUTPUT__COLOR",
        "WEDBOOK_OUTPUT__WIDTH",
        "WEDBOOK_LOGGING__JSON_LINES",
    ):
        monkeypatch.delenv(var, raising=False)

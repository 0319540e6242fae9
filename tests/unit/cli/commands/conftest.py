"""Shared fixtures for CLI command tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup() -> Generator[None, None, None]:
    """Keep commands from attaching stderr handlers to the package logger."""
    with (
        patch("findingdeck.cli.commands.view.setup_logging"),
        patch("findingdeck.cli.commands.export.setup_logging"),
        patch("findingdeck.cli.commands.records.setup_logging"),
    ):
        yield


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove FINDINGDECK_* variables inherited from the developer shell."""
    for name in (
        "FINDINGDECK_CORPUS_SOURCE",
        "FINDINGDECK_LOAD_TIMEOUT",
        "FINDINGDECK_TAB_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)

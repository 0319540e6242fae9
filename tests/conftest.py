"""Pytest configuration and shared fixtures for findingdeck tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_corpus_path() -> Path:
    """Path to the three-record sample corpus."""
    return FIXTURES_DIR / "corpus" / "hallazgos_sample.md"


@pytest.fixture
def sample_corpus(sample_corpus_path: Path) -> str:
    """Text of the three-record sample corpus."""
    return sample_corpus_path.read_text(encoding="utf-8")


@pytest.fixture
def two_record_corpus() -> str:
    """Corpus where only record 1 has a Consequences section."""
    return (
        "# Hallazgo 1: Duplicación\n"
        "\n"
        "## Descripción\n"
        "Código repetido en tres módulos.\n"
        "\n"
        "## Consecuencias\n"
        "1. Correcciones incompletas\n"
        "2. Más código que revisar\n"
        "3. Comportamientos divergentes\n"
        "\n"
        "# Hallazgo 2: Nombres ambiguos\n"
        "\n"
        "## Descripción\n"
        "Variables llamadas `data` y `tmp`.\n"
    )

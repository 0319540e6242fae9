"""Tests for the 'findingdeck export' command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from findingdeck.cli.main import main


@pytest.mark.unit
class TestExportCommand:
    """Tests for writing the HTML viewer."""

    def test_writes_page(
        self, cli_runner: CliRunner, temp_dir: Path, sample_corpus_path: Path
    ) -> None:
        """Test that every record is rendered into the output file."""
        output = temp_dir / "informe.html"

        result = cli_runner.invoke(
            main, ["export", str(sample_corpus_path), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert f"Viewer saved to {output} (3 hallazgos)" in result.output
        page = output.read_text(encoding="utf-8")
        assert "Hallazgo 1: Funciones con demasiadas responsabilidades" in page
        assert "Hallazgo 3: Manejo de errores silencioso" in page
        assert '<div class="panel" id="tab-1">' in page

    def test_initial_tab(
        self, cli_runner: CliRunner, temp_dir: Path, sample_corpus_path: Path
    ) -> None:
        output = temp_dir / "informe.html"

        result = cli_runner.invoke(
            main,
            ["export", str(sample_corpus_path), "-o", str(output), "--tab", "3"],
        )

        assert result.exit_code == 0
        assert '<div class="panel" id="tab-3">' in output.read_text(encoding="utf-8")

    def test_fallback_file(
        self, cli_runner: CliRunner, temp_dir: Path, sample_corpus_path: Path
    ) -> None:
        """Test that --fallback-file replaces a missing source without prompting."""
        output = temp_dir / "informe.html"

        result = cli_runner.invoke(
            main,
            [
                "export",
                str(temp_dir / "no-existe.md"),
                "--fallback-file",
                str(sample_corpus_path),
                "-o",
                str(output),
            ],
        )

        assert result.exit_code == 0
        assert output.exists()

    def test_unknown_tab(
        self, cli_runner: CliRunner, temp_dir: Path, sample_corpus_path: Path
    ) -> None:
        result = cli_runner.invoke(
            main,
            [
                "export",
                str(sample_corpus_path),
                "-o",
                str(temp_dir / "x.html"),
                "--tab",
                "99",
            ],
        )

        assert result.exit_code == 1
        assert "Tab 99 does not exist" in result.output

"""Tests for the terminal rendering surface."""

import pytest

from findingdeck.config.defaults import PENDING_MESSAGE
from findingdeck.lib.record_builder import build_records
from findingdeck.lib.ui.colors import ANSIColors
from findingdeck.models.record import (
    CodeBlock,
    Paragraph,
    SectionLabel,
    Severity,
    StructuredRecord,
)
from findingdeck.viewer.controller import PresentationController
from findingdeck.viewer.terminal_surface import TerminalSurface


@pytest.mark.unit
class TestTerminalSurfaceRender:
    """Tests for record rendering without styling."""

    @pytest.fixture
    def rendered(self, sample_corpus: str) -> str:
        surface = TerminalSurface([1], force_tty=False)
        surface.render(1, build_records(sample_corpus)[1])
        return surface.panels[1]

    def test_title_and_headings(self, rendered: str) -> None:
        """Test that the title and Spanish section headings are shown."""
        lines = rendered.splitlines()
        assert lines[0] == "Hallazgo 1: Funciones con demasiadas responsabilidades"
        assert "Descripción" in lines
        assert "Impacto en el mantenimiento [Alto]" in lines

    def test_principal_concern(self, rendered: str) -> None:
        assert "  > cada cambio obliga a revisar tres flujos distintos." in rendered

    def test_lists(self, rendered: str) -> None:
        """Test list markers and stripped inline markup."""
        lines = rendered.splitlines()
        assert "  1. Acoplamiento entre validación y notificación." in lines
        assert "  - Extraer validarPedido" in lines

    def test_code_is_indented(self, rendered: str) -> None:
        assert "src/pedidos/procesar.js" in rendered
        assert "    function procesarPedido(pedido) {" in rendered.splitlines()

    def test_no_escape_codes(self, rendered: str) -> None:
        assert "\033[" not in rendered


@pytest.mark.unit
class TestTerminalSurfaceStyling:
    """Tests for ANSI styling on a terminal."""

    def test_severity_badge_colored(self) -> None:
        record = StructuredRecord(
            ordinal=1,
            title="t",
            sections={
                SectionLabel.MAINTENANCE_IMPACT: Paragraph(
                    text="x", severity=Severity.MEDIUM
                )
            },
        )
        surface = TerminalSurface([1], force_tty=True)
        surface.render(1, record)
        assert f"{ANSIColors.YELLOW}[Medio]{ANSIColors.RESET}" in surface.panels[1]

    def test_paragraph_bold(self) -> None:
        record = StructuredRecord(
            ordinal=1,
            title="t",
            sections={SectionLabel.DESCRIPTION: Paragraph(text="muy **grave**")},
        )
        surface = TerminalSurface([1], force_tty=True)
        surface.render(1, record)
        assert f"muy {ANSIColors.BOLD}grave{ANSIColors.RESET}" in surface.panels[1]

    def test_code_highlighted(self) -> None:
        record = StructuredRecord(
            ordinal=1,
            title="t",
            sections={SectionLabel.PROBLEMATIC_EXAMPLE: CodeBlock(source="return")},
        )
        surface = TerminalSurface([1], force_tty=True)
        surface.render(1, record)
        assert f"    {ANSIColors.BLUE}return{ANSIColors.RESET}" in surface.panels[1]


@pytest.mark.unit
class TestTerminalSurfaceTabs:
    """Tests for tab strip and panel output."""

    def test_tab_bar_marks_active(self) -> None:
        surface = TerminalSurface([1, 2, 3], force_tty=False)
        surface.activate(2)
        assert surface.tab_bar() == " 1  [2]  3 "

    def test_show_prints_active_panel(
        self, capsys: pytest.CaptureFixture[str], sample_corpus: str
    ) -> None:
        """Test that show() echoes the tab strip and the active record."""
        surface = TerminalSurface(range(1, 4), force_tty=False)
        controller = PresentationController(surface, surface.tabs)
        controller.load(sample_corpus)
        controller.select(3)

        surface.show()

        out = capsys.readouterr().out
        assert out.splitlines()[0] == " 1   2  [3]"
        assert "Hallazgo 3: Manejo de errores silencioso" in out
        assert "Hallazgo 1:" not in out

    def test_pending_before_load(self, capsys: pytest.CaptureFixture[str]) -> None:
        surface = TerminalSurface([1, 2], force_tty=False)
        PresentationController(surface, surface.tabs)
        surface.show()
        assert PENDING_MESSAGE in capsys.readouterr().out

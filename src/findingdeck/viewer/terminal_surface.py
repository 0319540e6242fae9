"""Terminal rendering surface for the interactive viewer."""

import html
import re
from collections.abc import Iterable

import click

from findingdeck.config.defaults import (
    DEFAULT_SECTION_ALIASES,
    PENDING_MESSAGE,
    SEVERITY_DISPLAY,
)
from findingdeck.lib.code_tokenizer import highlight_ansi
from findingdeck.lib.ui.colors import SEVERITY_COLORS, ANSIColors, colorize
from findingdeck.lib.ui.terminal import terminal_width
from findingdeck.models.record import (
    SECTION_ORDER,
    AnyFragment,
    CodeBlock,
    OrderedList,
    Paragraph,
    StructuredRecord,
)

_STRONG_RE = re.compile(r"<strong>(.*?)</strong>")
_CODE_RE = re.compile(r"<code>(.*?)</code>")
_MARKDOWN_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")


class TerminalSurface:
    """Keep one text panel per tab and echo the active one on demand.

    Attributes:
        tabs: Declared tab ordinals
        active: Currently visible tab
        panels: Rendered text per tab
        force_tty: Override TTY detection for styling (None auto-detects)
    """

    def __init__(self, tabs: Iterable[int], force_tty: bool | None = None) -> None:
        """Create an empty panel for every declared tab."""
        self.tabs: tuple[int, ...] = tuple(tabs)
        self.active: int | None = None
        self.force_tty = force_tty
        self.panels: dict[int, str] = {ordinal: "" for ordinal in self.tabs}

    def activate(self, ordinal: int) -> None:
        self.active = ordinal

    def deactivate(self, ordinal: int) -> None:
        if self.active == ordinal:
            self.active = None

    def show_pending(self, ordinal: int) -> None:
        self.panels[ordinal] = self._style(PENDING_MESSAGE, ANSIColors.YELLOW)

    def show_message(self, ordinal: int, message: str) -> None:
        self.panels[ordinal] = self._style(message, ANSIColors.YELLOW)

    def render(self, ordinal: int, record: StructuredRecord) -> None:
        lines = [
            self._style(f"Hallazgo {record.ordinal}: {record.title}", ANSIColors.BOLD),
            "",
        ]
        for label in SECTION_ORDER:
            fragment = record.get(label)
            if fragment is None:
                continue
            heading = self._style(DEFAULT_SECTION_ALIASES[label][0], ANSIColors.CYAN)
            if fragment.severity is not None:
                badge = f"[{SEVERITY_DISPLAY[fragment.severity]}]"
                color = SEVERITY_COLORS[fragment.severity.value]
                heading = f"{heading} {self._style(badge, color)}"
            lines.append(heading)
            if fragment.principal_concern:
                lines.append(f"  > {fragment.principal_concern}")
            lines.extend(self._fragment_lines(fragment))
            lines.append("")
        self.panels[ordinal] = "\n".join(lines).rstrip()

    def tab_bar(self) -> str:
        """Return the numbered tab strip with the active tab highlighted."""
        labels = []
        for ordinal in self.tabs:
            if ordinal == self.active:
                labels.append(self._style(f"[{ordinal}]", ANSIColors.BOLD))
            else:
                labels.append(f" {ordinal} ")
        return " ".join(labels)

    def show(self) -> None:
        """Echo the tab strip and the active panel."""
        click.echo(self.tab_bar())
        click.echo("-" * min(terminal_width(), 80))
        if self.active is not None:
            click.echo(self.panels.get(self.active, ""))

    def _fragment_lines(self, fragment: AnyFragment) -> list[str]:
        if isinstance(fragment, CodeBlock):
            lines = []
            if fragment.file_path:
                lines.append(self._style(fragment.file_path, ANSIColors.GREY))
            code = highlight_ansi(fragment.source, force_tty=self.force_tty)
            lines.extend(f"    {line}" for line in code.splitlines())
            return lines
        if isinstance(fragment, Paragraph):
            text = _MARKDOWN_BOLD_RE.sub(
                lambda m: self._style(m.group(1), ANSIColors.BOLD), fragment.text
            )
            return text.splitlines()
        marker = "{n}." if isinstance(fragment, OrderedList) else "-"
        return [
            f"  {marker.format(n=n)} {self._plain(item)}"
            for n, item in enumerate(fragment.items, 1)
        ]

    def _plain(self, markup: str) -> str:
        text = _STRONG_RE.sub(
            lambda m: self._style(m.group(1), ANSIColors.BOLD), markup
        )
        return html.unescape(_CODE_RE.sub(r"\1", text))

    def _style(self, text: str, color: str) -> str:
        return colorize(text, color, force_tty=self.force_tty)

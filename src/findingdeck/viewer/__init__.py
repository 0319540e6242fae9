"""Tabbed presentation of structured finding records."""

from findingdeck.viewer.controller import PresentationController, TabState
from findingdeck.viewer.html_surface import HtmlSurface
from findingdeck.viewer.surface import RenderingSurface
from findingdeck.viewer.terminal_surface import TerminalSurface

__all__ = [
    "HtmlSurface",
    "PresentationController",
    "RenderingSurface",
    "TabState",
    "TerminalSurface",
]

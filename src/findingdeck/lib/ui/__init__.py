"""Terminal helpers for the interactive viewer.

- TTY detection and width lookup
- ANSI styling with graceful degradation off a terminal
"""

from findingdeck.lib.ui.colors import (
    SEVERITY_COLORS,
    TOKEN_COLORS,
    ANSIColors,
    colorize,
)
from findingdeck.lib.ui.terminal import is_tty, terminal_width

__all__ = [
    "ANSIColors",
    "SEVERITY_COLORS",
    "TOKEN_COLORS",
    "colorize",
    "is_tty",
    "terminal_width",
]

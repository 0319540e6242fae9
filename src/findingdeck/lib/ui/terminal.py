"""Terminal detection utilities."""

import shutil
import sys

DEFAULT_WIDTH = 80


def is_tty() -> bool:
    """Check if stdout is connected to a terminal.

    Used to decide between ANSI styled output and plain text suitable for
    pipes and files.
    """
    return sys.stdout.isatty()


def terminal_width(default: int = DEFAULT_WIDTH) -> int:
    """Return the terminal column count, falling back to ``default``."""
    return shutil.get_terminal_size((default, 24)).columns

"""ANSI styling for the terminal viewer.

Styles degrade to plain text when stdout is not a terminal, keeping piped
output and test captures free of escape codes.
"""

from findingdeck.lib.ui.terminal import is_tty


class ANSIColors:
    """ANSI escape codes used by the terminal viewer.

    Attributes:
        GREEN: Low severity badge, strings in code
        RED: High severity badge
        YELLOW: Medium severity badge, pending notices
        BLUE: Keywords in code
        MAGENTA: Type names in code
        CYAN: Section headings, numbers in code
        GREY: Comments in code, file path annotations
        BOLD: Emphasis and record titles
        RESET: Restore default terminal style
    """

    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GREY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


# Keyed by code_tokenizer.TokenKind values
TOKEN_COLORS: dict[str, str] = {
    "keyword": ANSIColors.BLUE,
    "type": ANSIColors.MAGENTA,
    "string": ANSIColors.GREEN,
    "comment": ANSIColors.GREY,
    "number": ANSIColors.CYAN,
}

# Keyed by models.record.Severity values
SEVERITY_COLORS: dict[str, str] = {
    "high": ANSIColors.RED,
    "medium": ANSIColors.YELLOW,
    "low": ANSIColors.GREEN,
}


def colorize(text: str, color: str, force_tty: bool | None = None) -> str:
    """Wrap text in an ANSI style when writing to a terminal.

    Args:
        text: Text to style
        color: Escape code from ANSIColors
        force_tty: Override TTY detection (for testing). None auto-detects.

    Returns:
        Styled text in TTY mode, the unchanged text otherwise
    """
    use_colors = force_tty if force_tty is not None else is_tty()
    if not use_colors or not text:
        return text
    return f"{color}{text}{ANSIColors.RESET}"

"""Best-effort source highlighting for code samples.

Purely cosmetic: the vocabulary is a closed set of common keywords and type
names from the languages that appear in findings (JavaScript/TypeScript,
Python, Java, C#). Anything unrecognised passes through as plain text and a
failure returns the unhighlighted source.
"""

import html
import re
from collections.abc import Iterator
from enum import Enum

from findingdeck.lib.logging_config import get_logger
from findingdeck.lib.ui.colors import TOKEN_COLORS, colorize

logger = get_logger(__name__)


class TokenKind(str, Enum):
    """Highlight classes for source tokens."""

    KEYWORD = "keyword"
    TYPE = "type"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"


KEYWORDS: frozenset[str] = frozenset(
    {
        "async", "await", "break", "case", "catch", "class", "const",
        "continue", "def", "default", "delete", "do", "elif", "else",
        "export", "extends", "finally", "for", "from", "function", "if",
        "implements", "import", "in", "interface", "lambda", "let", "new",
        "not", "of", "pass", "private", "protected", "public", "raise",
        "return", "static", "super", "switch", "this", "throw", "try",
        "typeof", "var", "void", "while", "with", "yield", "None", "True",
        "False", "null", "undefined", "true", "false", "self",
    }
)  # fmt: skip

TYPES: frozenset[str] = frozenset(
    {
        "Array", "Boolean", "Date", "Error", "Map", "Number", "Object",
        "Promise", "Set", "String", "any", "bool", "boolean", "dict",
        "float", "int", "list", "number", "object", "str", "string",
        "tuple", "List", "Dict", "Optional", "Integer", "Long", "Double",
    }
)  # fmt: skip

_TOKEN_RE = re.compile(
    r"(?P<comment>//[^\n]*|/\*.*?\*/|#[^\n]*)"
    r"|(?P<string>\"(?:\\.|[^\"\\\n])*\"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)"
    r"|(?P<number>\b\d+(?:\.\d+)?\b)"
    r"|(?P<word>[A-Za-z_$][\w$]*)",
    re.DOTALL,
)


def iter_tokens(source: str) -> Iterator[tuple[TokenKind | None, str]]:
    """Split source into ``(kind, text)`` pairs covering the whole input.

    Plain text between recognised tokens, and words outside the vocabulary,
    are yielded with a ``None`` kind.
    """
    position = 0
    for match in _TOKEN_RE.finditer(source):
        if match.start() > position:
            yield None, source[position : match.start()]
        group = match.lastgroup
        text = match.group()
        if group == "word":
            if text in KEYWORDS:
                yield TokenKind.KEYWORD, text
            elif text in TYPES:
                yield TokenKind.TYPE, text
            else:
                yield None, text
        else:
            yield TokenKind(group), text
        position = match.end()
    if position < len(source):
        yield None, source[position:]


def highlight_html(source: str) -> str:
    """Return escaped source with ``<span class="tok-...">`` wrappers."""
    try:
        return "".join(
            f'<span class="tok-{kind.value}">{html.escape(text)}</span>'
            if kind
            else html.escape(text)
            for kind, text in iter_tokens(source)
        )
    except Exception:
        logger.debug("Highlighting failed, using plain source", exc_info=True)
        return html.escape(source)


def highlight_ansi(source: str, force_tty: bool | None = None) -> str:
    """Return source with ANSI colors, or plain text off a terminal."""
    try:
        return "".join(
            colorize(text, TOKEN_COLORS[kind.value], force_tty=force_tty)
            if kind
            else text
            for kind, text in iter_tokens(source)
        )
    except Exception:
        logger.debug("Highlighting failed, using plain source", exc_info=True)
        return source

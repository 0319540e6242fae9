"""Tests for findingdeck.lib.code_tokenizer."""

from unittest.mock import patch

import pytest

from findingdeck.lib.code_tokenizer import (
    TokenKind,
    highlight_ansi,
    highlight_html,
    iter_tokens,
)
from findingdeck.lib.ui.colors import ANSIColors


@pytest.mark.unit
class TestIterTokens:
    """Tests for iter_tokens()."""

    def test_tokens_cover_whole_input(self) -> None:
        """Test that joining token texts reproduces the source."""
        source = 'const total = items.length * 2; // "cuenta"\nreturn total;'
        assert "".join(text for _, text in iter_tokens(source)) == source

    def test_classifies_tokens(self) -> None:
        """Test keyword, type, number and comment classification."""
        tokens = [
            (kind, text)
            for kind, text in iter_tokens("let n: number = 42 // fin")
            if kind is not None
        ]
        assert tokens == [
            (TokenKind.KEYWORD, "let"),
            (TokenKind.TYPE, "number"),
            (TokenKind.NUMBER, "42"),
            (TokenKind.COMMENT, "// fin"),
        ]

    def test_strings_hide_keywords(self) -> None:
        """Test that keywords inside string literals stay part of the string."""
        tokens = list(iter_tokens("x = 'return if'"))
        assert (TokenKind.STRING, "'return if'") in tokens
        assert (TokenKind.KEYWORD, "return") not in tokens

    def test_python_comment(self) -> None:
        """Test hash comments."""
        tokens = list(iter_tokens("pass  # nada"))
        assert tokens[-1] == (TokenKind.COMMENT, "# nada")

    def test_unknown_words_are_plain(self) -> None:
        assert list(iter_tokens("procesarPedido")) == [(None, "procesarPedido")]

    def test_empty_source(self) -> None:
        assert list(iter_tokens("")) == []


@pytest.mark.unit
class TestHighlightHtml:
    """Tests for highlight_html()."""

    def test_wraps_tokens_in_spans(self) -> None:
        """Test that recognised tokens get tok-* classes."""
        result = highlight_html("return 1")
        assert result == (
            '<span class="tok-keyword">return</span> '
            '<span class="tok-number">1</span>'
        )

    def test_escapes_markup(self) -> None:
        """Test that source text is HTML-escaped."""
        result = highlight_html("if (a < b) {}")
        assert "&lt;" in result
        assert "<b" not in result

    def test_failure_returns_escaped_source(self) -> None:
        """Test that a tokenizer failure falls back to plain escaped text."""
        with patch(
            "findingdeck.lib.code_tokenizer.iter_tokens",
            side_effect=RuntimeError("boom"),
        ):
            assert highlight_html("a < b") == "a &lt; b"


@pytest.mark.unit
class TestHighlightAnsi:
    """Tests for highlight_ansi()."""

    def test_plain_when_not_tty(self) -> None:
        """Test that no escape codes are emitted off a terminal."""
        assert highlight_ansi("return 1", force_tty=False) == "return 1"

    def test_colors_when_tty(self) -> None:
        """Test that keywords are colored on a terminal."""
        result = highlight_ansi("return", force_tty=True)
        assert result == f"{ANSIColors.BLUE}return{ANSIColors.RESET}"

    def test_failure_returns_source(self) -> None:
        with patch(
            "findingdeck.lib.code_tokenizer.iter_tokens",
            side_effect=RuntimeError("boom"),
        ):
            assert highlight_ansi("return 1", force_tty=True) == "return 1"

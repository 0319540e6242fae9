"""Tests for fragment classification."""

from unittest.mock import patch

import pytest

from findingdeck.lib.fragment_formatter import (
    FragmentFormatter,
    format_section,
    render_inline,
)
from findingdeck.models.record import CodeBlock, OrderedList, Paragraph, UnorderedList


@pytest.mark.unit
class TestRenderInline:
    """Tests for render_inline()."""

    def test_bold_becomes_strong(self) -> None:
        assert render_inline("**clave** valor") == "<strong>clave</strong> valor"

    def test_inline_code(self) -> None:
        assert render_inline("usar `let`") == "usar <code>let</code>"

    def test_escapes_markup(self) -> None:
        assert render_inline("a < b & c") == "a &lt; b &amp; c"

    def test_plain_text_unchanged(self) -> None:
        assert render_inline("don't panic") == "don't panic"


@pytest.mark.unit
class TestFormatterInitialization:
    """Tests for FragmentFormatter configuration."""

    def test_default_majority(self) -> None:
        assert FragmentFormatter().list_majority == 0.5

    @pytest.mark.parametrize("value", [0, 1, -0.1, 1.5])
    def test_invalid_majority(self, value: float) -> None:
        with pytest.raises(ValueError, match="list_majority"):
            FragmentFormatter(list_majority=value)


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for fenced code classification."""

    def test_fenced_code_with_language(self) -> None:
        fragment = format_section("```python\nx = 1\nprint(x)\n```")
        assert isinstance(fragment, CodeBlock)
        assert fragment.language == "python"
        assert fragment.source == "x = 1\nprint(x)"
        assert fragment.file_path is None

    def test_fence_without_language(self) -> None:
        fragment = format_section("```\nraw\n```")
        assert isinstance(fragment, CodeBlock)
        assert fragment.language == "text"

    def test_tilde_fence(self) -> None:
        fragment = format_section("~~~js\nlet a;\n~~~")
        assert isinstance(fragment, CodeBlock)
        assert fragment.source == "let a;"

    def test_file_annotation_before_fence(self) -> None:
        text = "**Archivo:** `src/app/main.ts`\n\n```ts\nconst a = 1;\n```"
        fragment = format_section(text)
        assert isinstance(fragment, CodeBlock)
        assert fragment.file_path == "src/app/main.ts"

    def test_file_annotation_after_fence(self) -> None:
        text = "```ts\nconst a = 1;\n```\n**File:** `lib/a.ts`"
        fragment = format_section(text)
        assert isinstance(fragment, CodeBlock)
        assert fragment.file_path == "lib/a.ts"

    def test_distant_annotation_is_ignored(self) -> None:
        text = "**Archivo:** `lejos.py`\n\nuno\ndos\ntres\ncuatro\n```py\npass\n```"
        fragment = format_section(text)
        assert isinstance(fragment, CodeBlock)
        assert fragment.file_path is None

    def test_code_wins_over_bullets(self) -> None:
        text = "- uno\n- dos\n- tres\n- cuatro\n```js\nfoo();\n```"
        fragment = format_section(text)
        assert isinstance(fragment, CodeBlock)

    def test_code_wins_over_numbered_lines(self) -> None:
        text = "1. uno\n2. dos\n3. tres\n```\n4. cuatro\n```"
        assert isinstance(format_section(text), CodeBlock)

    def test_unterminated_fence_falls_through_to_list(self) -> None:
        text = "- uno\n- dos\n- tres\n```js\nsin cerrar"
        fragment = format_section(text)
        assert isinstance(fragment, UnorderedList)
        assert fragment.items == ("uno", "dos", "tres")

    def test_unterminated_fence_falls_through_to_paragraph(self) -> None:
        text = "Texto\n```python\nx = 1"
        fragment = format_section(text)
        assert isinstance(fragment, Paragraph)
        assert fragment.text == text

    def test_indented_fence_body_is_dedented(self) -> None:
        fragment = format_section("  ```py\n  def f():\n      pass\n  ```")
        assert isinstance(fragment, CodeBlock)
        assert fragment.source == "def f():\n    pass"


@pytest.mark.unit
class TestLists:
    """Tests for list classification."""

    def test_pure_bullet_list(self) -> None:
        fragment = format_section("- a\n- b\n- c")
        assert isinstance(fragment, UnorderedList)
        assert fragment.items == ("a", "b", "c")

    def test_numbered_list_with_bold(self) -> None:
        fragment = format_section("1. **Rendimiento** peor\n2. Más memoria\n")
        assert isinstance(fragment, OrderedList)
        assert fragment.items == ("<strong>Rendimiento</strong> peor", "Más memoria")

    def test_ordered_wins_over_unordered(self) -> None:
        fragment = format_section("1. uno\n2. dos\n- tres")
        assert isinstance(fragment, OrderedList)
        assert fragment.items == ("uno", "dos")

    def test_non_matching_lines_dropped(self) -> None:
        text = "Introducción:\n- a\n- b\n- c"
        fragment = format_section(text)
        assert isinstance(fragment, UnorderedList)
        assert fragment.items == ("a", "b", "c")

    def test_exactly_half_is_not_a_majority(self) -> None:
        text = "Primera línea\n- único punto"
        fragment = format_section(text)
        assert isinstance(fragment, Paragraph)

    def test_blank_lines_do_not_count(self) -> None:
        fragment = format_section("- a\n\n\n\n- b\n")
        assert isinstance(fragment, UnorderedList)
        assert fragment.items == ("a", "b")

    def test_star_bullets(self) -> None:
        fragment = format_section("* a\n* b")
        assert isinstance(fragment, UnorderedList)

    def test_bold_line_is_not_a_bullet(self) -> None:
        fragment = format_section("**Nota** importante\n**Otra** más")
        assert isinstance(fragment, Paragraph)

    def test_custom_majority(self) -> None:
        text = "intro\notra\n- a\n- b\n- c"
        assert isinstance(format_section(text), UnorderedList)
        strict = FragmentFormatter(list_majority=0.75)
        assert isinstance(strict.format(text), Paragraph)


@pytest.mark.unit
class TestParagraphs:
    """Tests for paragraph fallback and error handling."""

    def test_narrative_kept_verbatim(self) -> None:
        text = "Una línea.\n\nOtra con **negrita**."
        fragment = format_section(text)
        assert isinstance(fragment, Paragraph)
        assert fragment.text == text

    def test_empty_text(self) -> None:
        fragment = format_section("")
        assert isinstance(fragment, Paragraph)
        assert fragment.text == ""

    def test_internal_failure_degrades_to_paragraph(self) -> None:
        formatter = FragmentFormatter()
        with patch.object(formatter, "_code_block", side_effect=RuntimeError("boom")):
            fragment = formatter.format("- a\n- b")
        assert isinstance(fragment, Paragraph)
        assert fragment.text == "- a\n- b"

    def test_format_is_pure(self) -> None:
        text = "1. uno\n2. dos"
        assert format_section(text) == format_section(text)

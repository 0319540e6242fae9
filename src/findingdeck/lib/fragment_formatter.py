"""Convert raw section text into typed display fragments.

Classification is evaluated top to bottom and the first match wins:

1. A terminated fenced code block becomes a ``CodeBlock``; an inline
   ``**Archivo:** `path``` annotation next to the fence is attached.
2. Text where most non-blank lines start with ``N.`` becomes an
   ``OrderedList``.
3. Text where most non-blank lines start with ``-`` becomes an
   ``UnorderedList``.
4. Anything else is a ``Paragraph`` kept verbatim.

The formatter never raises: unterminated fences count as no fence, and any
unexpected failure degrades to a paragraph.
"""

import html
import re
import textwrap

from findingdeck.config.defaults import FILE_PATH_LABELS
from findingdeck.lib.logging_config import get_logger
from findingdeck.lib.text_locator import find_labeled_value
from findingdeck.models.record import (
    AnyFragment,
    CodeBlock,
    OrderedList,
    Paragraph,
    UnorderedList,
)

logger = get_logger(__name__)

_FENCED_BLOCK_RE = re.compile(
    r"^[ \t]{0,3}(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>[^\n`]*)\n"
    r"(?P<body>.*?)"
    r"^[ \t]{0,3}(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
_ORDERED_ITEM_RE = re.compile(r"^[ \t]*\d+\.[ \t]+(?P<item>.*\S)")
_UNORDERED_ITEM_RE = re.compile(r"^[ \t]*[-*][ \t]+(?P<item>.*\S)")
_BOLD_RE = re.compile(r"\*\*(?P<text>.+?)\*\*")
_INLINE_CODE_RE = re.compile(r"`(?P<text>[^`\n]+)`")

# Lines scanned on each side of a fence for the file annotation
ANNOTATION_WINDOW = 3


def render_inline(text: str) -> str:
    """Escape text and convert inline bold and code spans to markup.

    Example:
        >>> render_inline("**Nota:** usar `const` <siempre>")
        '<strong>Nota:</strong> usar <code>const</code> &lt;siempre&gt;'
    """
    escaped = html.escape(text, quote=False)
    escaped = _BOLD_RE.sub(r"<strong>\g<text></strong>", escaped)
    return _INLINE_CODE_RE.sub(r"<code>\g<text></code>", escaped)


class FragmentFormatter:
    """Classify section text into one fragment variant.

    Attributes:
        list_majority: Share of non-blank lines that must carry a list marker
            before the text is treated as a list (strictly greater than)
    """

    DEFAULT_LIST_MAJORITY = 0.5

    def __init__(self, list_majority: float = DEFAULT_LIST_MAJORITY) -> None:
        """Initialize the formatter.

        Args:
            list_majority: Fraction in (0, 1) used by the list rules

        Raises:
            ValueError: If list_majority is outside (0, 1)
        """
        if not 0 < list_majority < 1:
            raise ValueError("list_majority must be between 0 and 1")
        self.list_majority = list_majority

    def format(self, section_text: str) -> AnyFragment:
        """Convert section text into a fragment.

        Args:
            section_text: Raw text of a located section

        Returns:
            CodeBlock, OrderedList, UnorderedList or Paragraph
        """
        try:
            return self._classify(section_text)
        except Exception:
            logger.warning(
                "Fragment classification failed, keeping text as paragraph",
                exc_info=True,
            )
            return Paragraph(text=section_text)

    def _classify(self, text: str) -> AnyFragment:
        code = self._code_block(text)
        if code is not None:
            return code

        lines = [line for line in text.splitlines() if line.strip()]
        ordered = self._list_items(lines, _ORDERED_ITEM_RE)
        if ordered is not None:
            return OrderedList(items=ordered)
        unordered = self._list_items(lines, _UNORDERED_ITEM_RE)
        if unordered is not None:
            return UnorderedList(items=unordered)
        return Paragraph(text=text)

    def _code_block(self, text: str) -> CodeBlock | None:
        match = _FENCED_BLOCK_RE.search(text)
        if match is None:
            return None

        info = match["info"].split()
        language = info[0].lower() if info else "text"
        source = textwrap.dedent(match["body"]).rstrip("\n")

        before = "\n".join(text[: match.start()].splitlines()[-ANNOTATION_WINDOW:])
        after = "\n".join(text[match.end() :].splitlines()[:ANNOTATION_WINDOW])
        file_path = find_labeled_value(before, FILE_PATH_LABELS)
        if file_path is None:
            file_path = find_labeled_value(after, FILE_PATH_LABELS)

        return CodeBlock(language=language, source=source, file_path=file_path)

    def _list_items(
        self, lines: list[str], marker: re.Pattern[str]
    ) -> tuple[str, ...] | None:
        if not lines:
            return None
        matches = [m for m in (marker.match(line) for line in lines) if m]
        if len(matches) <= self.list_majority * len(lines):
            return None
        return tuple(render_inline(m["item"]) for m in matches)


def format_section(section_text: str) -> AnyFragment:
    """Format section text with the default list policy."""
    return FragmentFormatter().format(section_text)

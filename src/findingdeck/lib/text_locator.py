"""Locate named sections inside a finding's body text.

Secondary headings split a record body the same way top-level headings split
the corpus. Heading text drifts between records ("Descripción",
"## 2. DESCRIPCION:", "**Descripción**"), so comparisons go through
``normalize_heading`` which drops diacritics, case, enumerators and
punctuation.
"""

import re
import unicodedata
from collections.abc import Iterable, Iterator, Mapping

from findingdeck.config.defaults import DEFAULT_SECTION_ALIASES
from findingdeck.models.record import Section, SectionLabel

_FENCE_RE = re.compile(r"^[ \t]{0,3}(`{3,}|~{3,})")
_FENCE_CLOSE_RE = re.compile(r"^[ \t]{0,3}(`{3,}|~{3,})[ \t]*$")
_ATX_HEADING_RE = re.compile(
    r"^[ \t]{0,3}(?P<hashes>#{2,6})[ \t]+(?P<text>.+?)[ \t#]*$"
)
_BOLD_LINE_RE = re.compile(r"^[ \t]{0,3}\*\*(?P<text>[^*]+?)\*\*[ \t]*:?[ \t]*$")
_LABELED_VALUE_RE = re.compile(
    r"\*\*(?P<label>[^*\n]+?)\*\*[ \t]*:?[ \t]*(?P<value>[^\n]*)"
)
_LEADING_ENUMERATOR_RE = re.compile(r"^(?:\d+|[ivxlc]+)[.)]\s+")
_NON_WORD_RE = re.compile(r"[\W_]+")

# Bold-line headings sit below every Markdown level.
_BOLD_LEVEL = 7


def normalize_heading(text: str) -> str:
    """Normalize heading text for tolerant comparison.

    Args:
        text: Raw heading or label text

    Returns:
        Lower-case ASCII-folded words separated by single spaces

    Example:
        >>> normalize_heading("## 2. Impacto en el Mantenimiento:")
        'impacto en el mantenimiento'
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    folded = stripped.casefold().strip().lstrip("#").strip()
    folded = _LEADING_ENUMERATOR_RE.sub("", folded)
    return " ".join(_NON_WORD_RE.sub(" ", folded).split())


def _closing_fence(lines: list[str], start: int, fence: str) -> int | None:
    """Index of the line closing ``fence`` opened at ``start``, if any."""
    for index in range(start + 1, len(lines)):
        match = _FENCE_CLOSE_RE.match(lines[index])
        if match is None:
            continue
        closing = match.group(1)
        if closing[0] == fence[0] and len(closing) >= len(fence):
            return index
    return None


def iter_unfenced_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` for every line outside fenced code blocks.

    Only terminated fence pairs mask their content; the fence lines of a
    pair are not yielded. An opening fence that is never closed is an
    ordinary line. Offsets point at the first character of the line in
    ``text``; lines keep no trailing newline.
    """
    raw_lines = text.splitlines(keepends=True)
    lines = [raw_line.rstrip("\r\n") for raw_line in raw_lines]
    offsets = [0]
    for raw_line in raw_lines:
        offsets.append(offsets[-1] + len(raw_line))

    index = 0
    while index < len(lines):
        match = _FENCE_RE.match(lines[index])
        if match:
            closing = _closing_fence(lines, index, match.group(1))
            if closing is not None:
                index = closing + 1
                continue
        yield offsets[index], lines[index]
        index += 1


class TextLocator:
    """Find labelled sections within a record body.

    Attributes:
        aliases: Accepted heading texts per section label
    """

    def __init__(
        self, aliases: Mapping[SectionLabel, Iterable[str]] | None = None
    ) -> None:
        """Initialize the locator with heading aliases.

        Args:
            aliases: Heading texts per label. Defaults to the built-in
                Spanish and English headings.
        """
        source = aliases if aliases is not None else DEFAULT_SECTION_ALIASES
        self.aliases: dict[SectionLabel, frozenset[str]] = {
            label: frozenset(normalize_heading(h) for h in headings)
            for label, headings in source.items()
        }
        self._known = frozenset().union(*self.aliases.values())

    def headings(self, body_text: str) -> list[tuple[int, int, int, str]]:
        """List sub-headings as ``(line_start, content_start, level, text)``.

        Markdown headings of level 2-6 always count. A line holding only bold
        text counts when it names a known section and is reported below
        every Markdown level.
        """
        found: list[tuple[int, int, int, str]] = []
        for offset, line in iter_unfenced_lines(body_text):
            content_start = offset + len(line) + 1
            match = _ATX_HEADING_RE.match(line)
            if match:
                normalized = normalize_heading(match["text"])
                level = len(match["hashes"])
                found.append((offset, content_start, level, normalized))
                continue
            match = _BOLD_LINE_RE.match(line)
            if match:
                normalized = normalize_heading(match["text"])
                if normalized in self._known:
                    found.append((offset, content_start, _BOLD_LEVEL, normalized))
        return found

    def locate(self, body_text: str, label: SectionLabel) -> Section | None:
        """Return the first section headed by one of the label's aliases.

        The span ends at the next heading that names a known section, at the
        next unknown heading of the same or a higher level, or at the end of
        the body. Deeper unknown headings stay inside the section.

        Args:
            body_text: Record body without its top-level heading
            label: Section to look for

        Returns:
            The located section, or None when no heading matches
        """
        wanted = self.aliases.get(label, frozenset())
        headings = self.headings(body_text)
        for index, (_, content_start, level, normalized) in enumerate(headings):
            if normalized not in wanted:
                continue
            start = min(content_start, len(body_text))
            end = len(body_text)
            for line_start, _, next_level, next_text in headings[index + 1 :]:
                if next_text in self._known or next_level <= level:
                    end = line_start
                    break
            return Section(
                label=label,
                text=body_text[start:end].strip("\n").rstrip(),
                start=start,
                end=end,
            )
        return None


def locate(
    body_text: str,
    label: SectionLabel,
    aliases: Mapping[SectionLabel, Iterable[str]] | None = None,
) -> Section | None:
    """Locate ``label`` in ``body_text`` with the given or default aliases."""
    return TextLocator(aliases).locate(body_text, label)


def find_labeled_value(text: str, labels: Iterable[str]) -> str | None:
    """Find the value of an inline ``**Label:** value`` annotation.

    The colon may sit inside or outside the bold markers. When the value
    contains a backtick span its content is returned, otherwise the rest of
    the line.

    Args:
        text: Text to scan
        labels: Accepted label spellings

    Returns:
        The first matching value, or None
    """
    wanted = {normalize_heading(label) for label in labels}
    for match in _LABELED_VALUE_RE.finditer(text):
        if normalize_heading(match["label"]) not in wanted:
            continue
        value = match["value"].strip()
        ticked = re.search(r"`([^`]+)`", value)
        if ticked:
            return ticked.group(1).strip()
        if value:
            return value
    return None


def strip_labeled_lines(text: str, labels: Iterable[str]) -> str:
    """Remove lines that hold nothing but a ``**Label:** value`` annotation.

    List items are kept, since their annotation is part of the list.

    Args:
        text: Text to clean
        labels: Label spellings whose lines are removed

    Returns:
        ``text`` without the annotation lines, trimmed of blank edges
    """
    wanted = {normalize_heading(label) for label in labels}
    kept: list[str] = []
    for line in text.splitlines():
        match = _LABELED_VALUE_RE.match(line.strip())
        if match and normalize_heading(match["label"]) in wanted:
            continue
        kept.append(line)
    return "\n".join(kept).strip("\n")

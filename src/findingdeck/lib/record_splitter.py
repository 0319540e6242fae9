"""Split a findings corpus into raw record blocks.

A record starts at every top-level heading of the form
``# Hallazgo <ordinal>: <title>`` and runs until the next such heading or the
end of the corpus. Headings inside fenced code never start a record, and text
before the first heading is discarded.
"""

import re
from collections.abc import Iterator

from findingdeck.config.defaults import DEFAULT_RECORD_HEADING_PATTERN
from findingdeck.lib.logging_config import get_logger
from findingdeck.lib.text_locator import iter_unfenced_lines
from findingdeck.models.record import RecordBlock

logger = get_logger(__name__)

_DIGITS_RE = re.compile(r"\d+")


def parse_ordinal(token: str) -> int | None:
    """Parse the record number from a heading token.

    The first run of digits wins, so ``"3b"`` and ``"#07"`` both parse.

    Returns:
        A positive ordinal, or None when the token carries no usable number
    """
    match = _DIGITS_RE.search(token)
    if match is None:
        return None
    ordinal = int(match.group())
    return ordinal if ordinal > 0 else None


class RecordSplitter:
    """Cut a corpus into ``RecordBlock`` objects in document order.

    Attributes:
        pattern: Compiled heading pattern with ``ordinal`` and ``title`` groups
    """

    def __init__(self, pattern: str | re.Pattern[str] | None = None) -> None:
        """Initialize the splitter.

        Args:
            pattern: Heading regex; strings are compiled case-insensitively.
                Defaults to the Hallazgo/Finding heading pattern.

        Raises:
            ValueError: If the pattern lacks the ``ordinal`` or ``title`` group
        """
        if pattern is None:
            pattern = DEFAULT_RECORD_HEADING_PATTERN
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        missing = {"ordinal", "title"} - set(pattern.groupindex)
        if missing:
            raise ValueError(
                f"Record heading pattern must define group(s): {sorted(missing)}"
            )
        self.pattern = pattern

    def split(self, corpus: str) -> Iterator[RecordBlock]:
        """Yield one block per parseable record heading.

        Headings whose ordinal cannot be parsed are skipped with a warning;
        the text under them is dropped rather than appended to the previous
        record. Duplicate ordinals are yielded and logged.

        Args:
            corpus: Entire source document

        Yields:
            RecordBlock for each parseable heading, in corpus order
        """
        headings = self._headings(corpus)
        seen: set[int] = set()
        for index, (_, body_start, line_number, match) in enumerate(headings):
            body_end = (
                headings[index + 1][0] if index + 1 < len(headings) else len(corpus)
            )
            ordinal = parse_ordinal(match["ordinal"])
            if ordinal is None:
                logger.warning(
                    f"Skipping record heading on line {line_number}: "
                    f"no ordinal in {match['ordinal']!r}"
                )
                continue
            if ordinal in seen:
                logger.warning(
                    f"Duplicate record ordinal {ordinal} on line {line_number}"
                )
            seen.add(ordinal)
            yield RecordBlock(
                ordinal=ordinal,
                title=match["title"].strip(),
                body_text=corpus[body_start:body_end].strip("\r\n"),
                line_number=line_number,
            )

    def count(self, corpus: str) -> int:
        """Return the number of blocks ``split`` would yield."""
        return sum(1 for _ in self.split(corpus))

    def _headings(self, corpus: str) -> list[tuple[int, int, int, re.Match[str]]]:
        found: list[tuple[int, int, int, re.Match[str]]] = []
        for line_offset, line in iter_unfenced_lines(corpus):
            match = self.pattern.match(line)
            if match is None:
                continue
            body_start = min(line_offset + len(line) + 1, len(corpus))
            line_number = corpus.count("\n", 0, line_offset) + 1
            found.append((line_offset, body_start, line_number, match))
        return found


def split_records(corpus: str) -> Iterator[RecordBlock]:
    """Split ``corpus`` with the default heading pattern."""
    return RecordSplitter().split(corpus)

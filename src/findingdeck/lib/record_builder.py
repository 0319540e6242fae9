"""Assemble structured records from raw record blocks.

For each section label the builder locates the section in the record body
and formats it. The maintenance impact section additionally carries two
inline annotations, a severity tag and a one-line principal concern, which
are attached to its fragment instead of becoming sections of their own.
Standalone annotation lines are removed from the displayed text.
"""

from collections.abc import Iterable

from findingdeck.config.defaults import (
    PRINCIPAL_CONCERN_LABELS,
    SEVERITY_LABELS,
    SEVERITY_VOCABULARY,
)
from findingdeck.lib.fragment_formatter import FragmentFormatter
from findingdeck.lib.logging_config import get_logger
from findingdeck.lib.record_splitter import RecordSplitter
from findingdeck.lib.text_locator import (
    TextLocator,
    find_labeled_value,
    normalize_heading,
    strip_labeled_lines,
)
from findingdeck.models.record import (
    SECTION_ORDER,
    AnyFragment,
    RecordBlock,
    SectionLabel,
    Severity,
    StructuredRecord,
)

logger = get_logger(__name__)


def normalize_severity(value: str | None) -> Severity | None:
    """Map a free-text severity to the closed vocabulary.

    The first vocabulary with a term contained in the normalized value wins
    (high, then medium, then low).

    Example:
        >>> normalize_severity("**ALTA** (crítico para releases)")
        <Severity.HIGH: 'high'>
    """
    if not value:
        return None
    normalized = normalize_heading(value)
    for severity, terms in SEVERITY_VOCABULARY.items():
        if any(term in normalized for term in terms):
            return severity
    return None


class RecordBuilder:
    """Build ``StructuredRecord`` objects from ``RecordBlock`` objects.

    The builder is stateless apart from its collaborators, so building the
    same block twice yields equal records.

    Attributes:
        locator: Section locator
        formatter: Fragment formatter
    """

    def __init__(
        self,
        locator: TextLocator | None = None,
        formatter: FragmentFormatter | None = None,
    ) -> None:
        """Initialize the builder with optional collaborators."""
        self.locator = locator or TextLocator()
        self.formatter = formatter or FragmentFormatter()

    def build(self, block: RecordBlock) -> StructuredRecord:
        """Build the structured record for one block.

        Args:
            block: Raw record text

        Returns:
            Record with one fragment per section present in the body
        """
        sections: dict[SectionLabel, AnyFragment] = {}
        for label in SECTION_ORDER:
            section = self.locator.locate(block.body_text, label)
            if section is None:
                logger.debug(f"Record {block.ordinal}: no {label.value} section")
                continue
            if label is SectionLabel.MAINTENANCE_IMPACT:
                fragment = self._impact_fragment(section.text)
            else:
                fragment = self.formatter.format(section.text)
            sections[label] = fragment
        return StructuredRecord(
            ordinal=block.ordinal, title=block.title, sections=sections
        )

    def _impact_fragment(self, text: str) -> AnyFragment:
        severity = normalize_severity(find_labeled_value(text, SEVERITY_LABELS))
        concern = find_labeled_value(text, PRINCIPAL_CONCERN_LABELS)
        if severity is None and concern is None:
            return self.formatter.format(text)
        labels = (*SEVERITY_LABELS, *PRINCIPAL_CONCERN_LABELS)
        fragment = self.formatter.format(strip_labeled_lines(text, labels))
        return fragment.model_copy(
            update={"severity": severity, "principal_concern": concern}
        )


def build_records(
    corpus: str,
    splitter: RecordSplitter | None = None,
    builder: RecordBuilder | None = None,
) -> dict[int, StructuredRecord]:
    """Split and build a whole corpus.

    Only the first block of each ordinal is kept, so the result holds one
    record per distinct parseable heading.

    Args:
        corpus: Entire source document
        splitter: Splitter to use (default heading pattern if omitted)
        builder: Builder to use (default collaborators if omitted)

    Returns:
        Records keyed by ordinal, in corpus order
    """
    splitter = splitter or RecordSplitter()
    builder = builder or RecordBuilder()
    return {
        block.ordinal: builder.build(block)
        for block in first_blocks(splitter.split(corpus))
    }


def first_blocks(blocks: Iterable[RecordBlock]) -> list[RecordBlock]:
    """Drop blocks whose ordinal already appeared earlier."""
    kept: dict[int, RecordBlock] = {}
    for block in blocks:
        kept.setdefault(block.ordinal, block)
    return list(kept.values())

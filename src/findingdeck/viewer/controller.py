"""Tab state and on-demand population of finding records.

The controller owns the only mutable UI state: which tab is active and which
tabs already hold a rendered record. Records are built the first time their
tab is shown and never rebuilt afterwards.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from findingdeck.config.defaults import NO_RECORDS_MESSAGE
from findingdeck.lib.errors import TabNotFoundError
from findingdeck.lib.logging_config import get_logger
from findingdeck.lib.record_builder import RecordBuilder
from findingdeck.lib.record_splitter import RecordSplitter
from findingdeck.models.record import RecordBlock, StructuredRecord
from findingdeck.viewer.surface import RenderingSurface

logger = get_logger(__name__)

BUILD_FAILED_MESSAGE = "No se pudo mostrar este hallazgo."


@dataclass
class TabState:
    """Active tab and the set of tabs already rendered."""

    active_ordinal: int
    populated: set[int] = field(default_factory=set)


class PresentationController:
    """Drive a rendering surface from user tab selections.

    Exactly one declared tab is active at any time. Until ``load`` is called
    every tab shows the pending indicator; tabs with no matching record stay
    pending.

    Example:
        >>> surface = HtmlSurface(range(1, 11))
        >>> controller = PresentationController(surface, range(1, 11))
        >>> controller.load(corpus_text)
        >>> controller.select(3)
    """

    def __init__(
        self,
        surface: RenderingSurface,
        tab_ordinals: Iterable[int],
        builder: RecordBuilder | None = None,
        splitter: RecordSplitter | None = None,
    ) -> None:
        """Initialize the controller and show every tab as pending.

        Args:
            surface: Rendering surface with one panel per tab
            tab_ordinals: Declared tab ordinals, in display order
            builder: Record builder (defaults to the standard pipeline)
            splitter: Record splitter (defaults to the standard heading pattern)

        Raises:
            ValueError: If no tabs are declared
        """
        self.tabs: tuple[int, ...] = tuple(dict.fromkeys(tab_ordinals))
        if not self.tabs:
            raise ValueError("At least one tab must be declared")
        self.surface = surface
        self.builder = builder or RecordBuilder()
        self.splitter = splitter or RecordSplitter()
        self.state = TabState(active_ordinal=self.tabs[0])
        self._blocks: dict[int, RecordBlock] | None = None
        self._records: dict[int, StructuredRecord] = {}

        for ordinal in self.tabs:
            self.surface.show_pending(ordinal)
        self.surface.activate(self.state.active_ordinal)

    @property
    def loaded(self) -> bool:
        """Whether a corpus has been handed to the controller."""
        return self._blocks is not None

    @property
    def records(self) -> dict[int, StructuredRecord]:
        """Records built so far, keyed by ordinal."""
        return dict(self._records)

    def load(self, corpus: str) -> None:
        """Accept the corpus and populate the active tab.

        An empty split shows the no-records notice on every tab.

        Args:
            corpus: Entire source document
        """
        blocks: dict[int, RecordBlock] = {}
        for block in self.splitter.split(corpus):
            blocks.setdefault(block.ordinal, block)
        self._blocks = blocks
        logger.info(f"Corpus loaded: {len(blocks)} record(s)")

        if not blocks:
            logger.warning("No record headings found in corpus")
            for ordinal in self.tabs:
                self.surface.show_message(ordinal, NO_RECORDS_MESSAGE)
            return

        unbound = sorted(set(blocks) - set(self.tabs))
        if unbound:
            logger.debug(f"Records without a tab are ignored: {unbound}")
        self._populate(self.state.active_ordinal)

    def select(self, ordinal: int) -> None:
        """Switch to a tab, building its record on first visit.

        Args:
            ordinal: Declared tab to activate

        Raises:
            TabNotFoundError: If the tab was never declared
        """
        if ordinal not in self.tabs:
            raise TabNotFoundError(ordinal, self.tabs)

        current = self.state.active_ordinal
        if ordinal != current:
            self.surface.deactivate(current)
            self.state.active_ordinal = ordinal
            self.surface.activate(ordinal)

        if self.loaded:
            self._populate(ordinal)

    def populate_all(self) -> None:
        """Populate every tab that has a record, in tab order."""
        for ordinal in self.tabs:
            self._populate(ordinal)

    def _populate(self, ordinal: int) -> None:
        if ordinal in self.state.populated or self._blocks is None:
            return
        block = self._blocks.get(ordinal)
        if block is None:
            logger.debug(f"Tab {ordinal} has no record; leaving it pending")
            return

        try:
            record = self.builder.build(block)
        except Exception:
            logger.error(f"Failed to build record {ordinal}", exc_info=True)
            self.surface.show_message(ordinal, BUILD_FAILED_MESSAGE)
        else:
            self._records[ordinal] = record
            self.surface.render(ordinal, record)
        self.state.populated.add(ordinal)

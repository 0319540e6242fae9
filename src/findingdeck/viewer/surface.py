"""Rendering surface protocol used by the presentation controller."""

from typing import Protocol

from findingdeck.models.record import StructuredRecord


class RenderingSurface(Protocol):
    """Where the controller puts each tab's content.

    A surface owns one panel per declared tab. The controller decides which
    panel is visible and what it holds; the surface decides how it looks.
    """

    def activate(self, ordinal: int) -> None:
        """Make the tab and its panel visible."""
        ...

    def deactivate(self, ordinal: int) -> None:
        """Hide the tab's panel."""
        ...

    def show_pending(self, ordinal: int) -> None:
        """Show the neutral loading indicator in the tab."""
        ...

    def show_message(self, ordinal: int, message: str) -> None:
        """Replace the tab content with a notice."""
        ...

    def render(self, ordinal: int, record: StructuredRecord) -> None:
        """Render a record's fragments into the tab."""
        ...

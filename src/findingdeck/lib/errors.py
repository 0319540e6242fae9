"""Custom exception hierarchy for findingdeck configuration and loading."""


class FindingDeckError(Exception):
    """Base exception for all findingdeck errors.

    All findingdeck-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI commands.
    """

    pass


class ConfigError(FindingDeckError):
    """Exception raised for configuration errors.

    Raised when the viewer configuration cannot be loaded or parsed.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(FindingDeckError):
    """Exception raised when a configuration file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message."""
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class CorpusLoadError(FindingDeckError):
    """Exception raised when the corpus could not be obtained at all.

    Raised only after the network attempt and the local file fallback have
    both failed.

    Attributes:
        source: The corpus source that was requested
        message: Human-readable error message
    """

    def __init__(self, source: str, message: str) -> None:
        """Create a load error for the given source."""
        self.source = source
        self.message = message
        super().__init__(f"Could not load corpus from '{source}': {message}")


class TabNotFoundError(FindingDeckError):
    """Exception raised when selecting a tab that was never declared."""

    def __init__(self, ordinal: int, available: tuple[int, ...]) -> None:
        """Create a tab error listing the declared tabs."""
        self.ordinal = ordinal
        self.available = available
        listed = ", ".join(str(t) for t in available)
        super().__init__(f"Tab {ordinal} does not exist (available: {listed})")

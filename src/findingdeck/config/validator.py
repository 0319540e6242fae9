"""Validation utilities for findingdeck configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one message per field.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of human-readable error messages

    Example:
        >>> from findingdeck.models.config import ViewerConfig
        >>> try:
        ...     ViewerConfig(tab_count=0)
        ... except PydanticValidationError as e:
        ...     flatten_pydantic_errors(e)
        ["Field 'tab_count': Input should be greater than or equal to 1"]
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"
        msg = error.get("msg", "Unknown error")

        if error.get("type") == "value_error":
            received = error.get("input")
            formatted = f"Field '{field_path}': {msg} (received: {received!r})"
        else:
            formatted = f"Field '{field_path}': {msg}"
        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]

"""Configuration loading for findingdeck."""

from findingdeck.config.loader import ConfigLoader

__all__ = ["ConfigLoader"]

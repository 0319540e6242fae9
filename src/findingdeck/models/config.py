"""Viewer configuration model."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from findingdeck.config.defaults import (
    DEFAULT_LOADER_CONFIG,
    DEFAULT_RECORD_HEADING_PATTERN,
)
from findingdeck.models.record import SectionLabel


class ViewerConfig(BaseModel):
    """Settings for loading, splitting and presenting a findings corpus.

    Loaded from ``findingdeck.yaml`` and environment variables by
    ``ConfigLoader``; every field has a default.
    """

    model_config = ConfigDict(extra="forbid")

    corpus_source: str = Field(
        default=str(DEFAULT_LOADER_CONFIG["corpus_source"]),
        description="URL or local path of the corpus",
    )
    load_timeout: float = Field(
        default=float(DEFAULT_LOADER_CONFIG["load_timeout"]),
        gt=0,
        description="Seconds to wait for a remote corpus before falling back",
    )
    tab_count: int = Field(
        default=int(DEFAULT_LOADER_CONFIG["tab_count"]),
        ge=1,
        le=200,
        description="Number of numbered tabs shown by the viewer",
    )
    record_heading_pattern: str = Field(
        default=DEFAULT_RECORD_HEADING_PATTERN,
        description="Regex for record headings with 'ordinal' and 'title' groups",
    )
    list_majority: float = Field(
        default=float(DEFAULT_LOADER_CONFIG["list_majority"]),
        gt=0,
        lt=1,
        description="Share of lines that must be list items to form a list",
    )
    section_aliases: dict[SectionLabel, list[str]] = Field(
        default_factory=dict,
        description="Extra accepted headings per section label",
    )
    page_title: str = Field(
        default=str(DEFAULT_LOADER_CONFIG["page_title"]),
        description="Title of the exported page",
    )

    @field_validator("corpus_source")
    @classmethod
    def validate_corpus_source(cls, v: str) -> str:
        """Reject blank sources."""
        if not v.strip():
            raise ValueError("corpus_source must not be empty")
        return v.strip()

    @field_validator("record_heading_pattern")
    @classmethod
    def validate_record_heading_pattern(cls, v: str) -> str:
        """Require a compilable pattern with ordinal and title groups."""
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        missing = {"ordinal", "title"} - set(compiled.groupindex)
        if missing:
            raise ValueError(f"pattern must define named group(s) {sorted(missing)}")
        return v

    @property
    def tab_ordinals(self) -> tuple[int, ...]:
        """Declared tab ordinals, 1 through tab_count."""
        return tuple(range(1, self.tab_count + 1))

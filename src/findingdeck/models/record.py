"""Data models for the finding extraction pipeline.

Defines the record blocks produced by the splitter, the located sections,
the typed fragments produced by the formatter and the structured records
assembled by the builder.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class SectionLabel(str, Enum):
    """Closed set of section labels a finding record may contain."""

    DESCRIPTION = "Description"
    PROBLEMATIC_EXAMPLE = "ProblematicExample"
    CONSEQUENCES = "Consequences"
    MAINTENANCE_IMPACT = "MaintenanceImpact"
    RECOMMENDED_SOLUTION = "RecommendedSolution"
    BENEFITS = "Benefits"
    CONCLUSION = "Conclusion"


# Render order for every record
SECTION_ORDER: tuple[SectionLabel, ...] = tuple(SectionLabel)


class Severity(str, Enum):
    """Closed vocabulary for the maintenance impact badge."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecordBlock(BaseModel):
    """Raw text of one finding, cut from the corpus by its top-level heading."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ordinal: PositiveInt = Field(..., description="Record number parsed from heading")
    title: str = Field(..., description="Heading text after the colon")
    body_text: str = Field(..., description="Text until the next record heading")
    line_number: int = Field(1, description="1-based line of the heading")


class Section(BaseModel):
    """A labelled span located inside a record body."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: SectionLabel
    text: str = Field(..., description="Section content without its heading")
    start: int = Field(..., ge=0, description="Offset of the content in the body")
    end: int = Field(..., ge=0, description="Exclusive end offset in the body")


class _FragmentBase(BaseModel):
    """Fields shared by every fragment variant.

    ``severity`` and ``principal_concern`` are only filled for the
    maintenance impact section, where they appear as inline annotations.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    severity: Severity | None = None
    principal_concern: str | None = None


class Paragraph(_FragmentBase):
    """Narrative text kept verbatim."""

    kind: Literal["paragraph"] = "paragraph"
    text: str


class OrderedList(_FragmentBase):
    """Numbered list; items are display-ready markup."""

    kind: Literal["ordered_list"] = "ordered_list"
    items: tuple[str, ...]


class UnorderedList(_FragmentBase):
    """Bulleted list; items are display-ready markup."""

    kind: Literal["unordered_list"] = "unordered_list"
    items: tuple[str, ...]


class CodeBlock(_FragmentBase):
    """Fenced code sample with an optional file path annotation."""

    kind: Literal["code"] = "code"
    language: str = "text"
    source: str
    file_path: str | None = None


AnyFragment = Paragraph | OrderedList | UnorderedList | CodeBlock

Fragment = Annotated[
    AnyFragment,
    Field(discriminator="kind"),
]


class StructuredRecord(BaseModel):
    """A finding with its sections converted to fragments.

    Missing sections are simply absent from ``sections``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ordinal: PositiveInt
    title: str
    sections: dict[SectionLabel, Fragment] = Field(default_factory=dict)

    def get(self, label: SectionLabel) -> AnyFragment | None:
        """Return the fragment for a label, or None when the section is absent."""
        return self.sections.get(label)

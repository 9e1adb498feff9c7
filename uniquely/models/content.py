"""Typed schema for the content records handed to the uniqueness engine.

Records come from an external content source (frontmatter + body).  Only the
human-readable fields the engine analyses are modelled here; everything else
in the frontmatter is ignored.  Values with an unexpected shape are dropped
while parsing, so a malformed field means "less text analysed", never a
failed validation.
"""

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

ContentCategory = Literal["service", "location"]


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _text_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _mapping_or_none(value: Any) -> Any:
    # Already-built models pass through untouched
    if isinstance(value, (dict, BaseModel)):
        return value
    return None


def _mapping_list(value: Any) -> List[Any]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]


OptionalText = Annotated[Optional[str], BeforeValidator(_text_or_none)]
TextList = Annotated[List[str], BeforeValidator(_text_list)]


class _Section(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class HeroSection(_Section):
    heading: OptionalText = None
    subheading: OptionalText = None
    description: OptionalText = None
    title: OptionalText = None


class AboutSection(_Section):
    what_is: OptionalText = Field(default=None, alias="whatIs")
    when_needed: TextList = Field(default_factory=list, alias="whenNeeded")
    what_achieve: TextList = Field(default_factory=list, alias="whatAchieve")
    key_points: TextList = Field(default_factory=list, alias="keyPoints")


class FaqItem(_Section):
    question: OptionalText = None
    answer: OptionalText = None


class SpecialistCard(_Section):
    title: OptionalText = None
    description: OptionalText = None


class SpecialistsSection(_Section):
    """Specialist cards block found on location pages."""

    title: OptionalText = None
    description: OptionalText = None
    cards: Annotated[List[SpecialistCard], BeforeValidator(_mapping_list)] = Field(
        default_factory=list
    )


class ContentFields(_Section):
    """Text-bearing frontmatter fields of a service or location page."""

    description: OptionalText = None
    hero: Annotated[Optional[HeroSection], BeforeValidator(_mapping_or_none)] = None
    about: Annotated[Optional[AboutSection], BeforeValidator(_mapping_or_none)] = None
    faqs: Annotated[List[FaqItem], BeforeValidator(_mapping_list)] = Field(
        default_factory=list
    )
    specialists: Annotated[
        Optional[SpecialistsSection], BeforeValidator(_mapping_or_none)
    ] = None


class ContentRecord(BaseModel):
    """One parsed page entering the engine.  Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(min_length=1, description="Unique path or key of the page.")
    category: ContentCategory
    frontmatter: ContentFields = Field(default_factory=ContentFields)
    body: str = ""
    body_format: Literal["text", "html"] = "text"
    """How :attr:`body` is encoded.

    ``"text"`` (default)
        Raw body (plain text, Markdown or MDX) analysed as-is.

    ``"html"``
        Rendered HTML; markup is stripped to visible text before analysis.
    """

    @classmethod
    def from_frontmatter(
        cls,
        path: str,
        frontmatter: dict,
        body: str = "",
        body_format: Literal["text", "html"] = "text",
    ) -> "ContentRecord":
        """Build a record from a parsed content file.

        The category is derived from the path: anything under a ``/services/``
        directory is a service page, everything else a location page.
        """
        category: ContentCategory = "service" if "/services/" in path else "location"
        return cls(
            identifier=path,
            category=category,
            frontmatter=ContentFields.model_validate(frontmatter),
            body=body,
            body_format=body_format,
        )

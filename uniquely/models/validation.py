from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from uniquely.models.content import ContentCategory

Severity = Literal["info", "warning", "error"]


class Thresholds(BaseModel):
    similarity_threshold: float = Field(
        default=70,
        validation_alias=AliasChoices("similarityThreshold", "similarity_threshold"),
        ge=0,
        le=100,
        description="Similarity percentage at or above which a page is flagged (0–100).",
    )
    boilerplate_min_occurrences: int = Field(
        default=3,
        validation_alias=AliasChoices(
            "boilerplateMinOccurrences", "boilerplate_min_occurrences"
        ),
        ge=1,
        description=(
            "Distinct pages a phrase must appear in to count as boilerplate (at least 1). "
            "A value of 1 reports every non-filler phrase of the page."
        ),
    )
    boilerplate_min_phrase_length: int = Field(
        default=5,
        validation_alias=AliasChoices(
            "boilerplateMinPhraseLength", "boilerplate_min_phrase_length"
        ),
        ge=2,
        le=20,
        description="Number of words in a boilerplate phrase (2–20).",
    )


class ValidatorConfig(BaseModel):
    enabled: bool = True
    severity: Literal["warning", "error"] = "warning"
    """Severity attached to ``UNIQ_001`` similarity issues.

    Boilerplate issues (``UNIQ_002``) are always ``"info"``.
    """
    thresholds: Thresholds = Field(default_factory=Thresholds)

    def merged(self, overrides: Optional[Dict[str, Any]] = None) -> "ValidatorConfig":
        """Return a copy with *overrides* applied; ``thresholds`` merge key by key."""
        if not overrides:
            return self
        data = self.model_dump()
        thresholds = overrides.get("thresholds")
        if thresholds is None:
            thresholds = data["thresholds"]
        elif isinstance(thresholds, dict):
            thresholds = {**data["thresholds"], **thresholds}
        data.update({k: v for k, v in overrides.items() if k != "thresholds"})
        data["thresholds"] = thresholds
        return ValidatorConfig.model_validate(data)


class SimilarityMatch(BaseModel):
    identifier: str
    similarity: float  # percentage, 0–100


class ValidationIssue(BaseModel):
    severity: Severity
    code: str
    message: str
    field: Optional[str] = None
    suggestion: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    """Outcome of running the uniqueness validator on one page."""

    identifier: str
    category: ContentCategory
    validator: str
    passed: bool
    issues: List[ValidationIssue]
    metrics: Dict[str, Union[int, float]] = Field(default_factory=dict)
    """``ngram_count`` and ``similar_documents_count`` stay integers; ``max_similarity`` is a float."""
    duration: float  # milliseconds


class RunSummary(BaseModel):
    """Counts aggregated over one corpus run."""

    total_documents: int
    passed_documents: int
    error_documents: int
    warning_documents: int
    total_errors: int
    total_warnings: int
    total_info: int
    results: List[ValidationResult]
    duration: float  # milliseconds

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from uniquely.models.content import ContentRecord


class ValidateCorpusRequest(BaseModel):
    records: List[ContentRecord] = Field(
        min_length=1,
        max_length=5000,
        description="Pages to validate, in discovery order (1–5000).",
    )
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Partial validator configuration merged over the defaults.",
        examples=[{"severity": "error", "thresholds": {"similarity_threshold": 80}}],
    )
    reset_cache: bool = True
    """Clear the corpus cache before the run.

    Leave enabled for independent runs; disable to keep comparing against the
    pages accumulated by earlier requests.
    """


class ValidateDocumentRequest(BaseModel):
    record: ContentRecord
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Partial validator configuration merged over the defaults.",
    )

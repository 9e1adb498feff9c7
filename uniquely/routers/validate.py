"""Validation endpoints: corpus runs, single pages and cache lifecycle."""

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from uniquely.models.request import ValidateCorpusRequest, ValidateDocumentRequest
from uniquely.models.response import CacheStatus, ValidateCorpusResponse
from uniquely.models.validation import ValidationResult, ValidatorConfig
from uniquely.services.runner import run_corpus
from uniquely.services.validator import UniquenessValidator

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


def _validator(request: Request) -> UniquenessValidator:
    return request.app.state.validator


def _merge_config(overrides: dict | None) -> ValidatorConfig:
    try:
        return ValidatorConfig().merged(overrides)
    except ValidationError as exc:
        logger.warning("Rejected validator config %s – %s", overrides, exc)
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False))


@router.post(
    "/validate",
    response_model=ValidateCorpusResponse,
    summary="Validate a corpus of pages for uniqueness",
    description=(
        "Validates the pages in the order given, comparing each one with the "
        "pages before it, and returns per-page results plus aggregated counts.\n\n"
        "The corpus cache is cleared first unless `reset_cache` is false."
    ),
)
@limiter.limit("10/minute")
def validate_corpus(request: Request, body: ValidateCorpusRequest) -> ValidateCorpusResponse:
    validator = _validator(request)
    logger.info(
        "Corpus validation request received",
        extra={"records": len(body.records), "reset_cache": body.reset_cache},
    )
    config = _merge_config(body.config)

    summary = run_corpus(
        body.records,
        validator,
        config=config.model_dump(),
        reset_cache=body.reset_cache,
    )
    return ValidateCorpusResponse(**summary.model_dump(), cache_size=validator.cache_size())


@router.post(
    "/validate/document",
    response_model=ValidationResult,
    summary="Validate one page against the accumulated corpus",
)
@limiter.limit("60/minute")
def validate_document(request: Request, body: ValidateDocumentRequest) -> ValidationResult:
    """Validate *record* and add it to the corpus cache.

    Returns 409 when the merged config disables the validator.
    """
    validator = _validator(request)
    config = _merge_config(body.config)
    if not config.enabled:
        raise HTTPException(status_code=409, detail="The uniqueness validator is disabled.")

    logger.info(
        "Document validation request received",
        extra={"identifier": body.record.identifier, "category": body.record.category},
    )
    return validator.validate(body.record, config)


@router.get("/cache", response_model=CacheStatus, summary="Corpus cache size")
async def cache_status(request: Request) -> CacheStatus:
    return CacheStatus(size=_validator(request).cache_size())


@router.delete("/cache", response_model=CacheStatus, summary="Clear the corpus cache")
async def clear_cache(request: Request) -> CacheStatus:
    validator = _validator(request)
    logger.info("Clearing corpus cache (%d page(s))", validator.cache_size())
    validator.clear_cache()
    return CacheStatus(size=0)

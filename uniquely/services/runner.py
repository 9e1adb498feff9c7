"""Corpus runs: validate an ordered batch of pages and aggregate the outcome."""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional

from uniquely.models.content import ContentRecord
from uniquely.models.validation import RunSummary, ValidationResult, ValidatorConfig
from uniquely.services.validator import UniquenessValidator

logger = logging.getLogger(__name__)


def run_corpus(
    records: Iterable[ContentRecord],
    validator: UniquenessValidator,
    config: Optional[Dict[str, Any]] = None,
    reset_cache: bool = True,
) -> RunSummary:
    """Validate *records* in order and count issues per page.

    A page with any error is an error page; otherwise a page with any
    warning is a warning page.  Every other page passed.

    Raises:
        pydantic.ValidationError: if *config* contains invalid values.
    """
    start = time.perf_counter()
    merged = ValidatorConfig().merged(config)

    if reset_cache:
        validator.clear_cache()

    results: List[ValidationResult] = []
    counts: Dict[str, int] = {"error": 0, "warning": 0, "info": 0}
    error_documents = 0
    warning_documents = 0

    if merged.enabled:
        for record in records:
            result = validator.validate(record, merged)
            results.append(result)

            severities = [issue.severity for issue in result.issues]
            for severity in severities:
                counts[severity] += 1
            if "error" in severities:
                error_documents += 1
            elif "warning" in severities:
                warning_documents += 1
    else:
        logger.info("Validator %s disabled – skipping corpus run", validator.name)

    duration = (time.perf_counter() - start) * 1000
    logger.info(
        "Corpus run finished: %d page(s), %d error page(s), %d warning page(s) in %.1f ms",
        len(results),
        error_documents,
        warning_documents,
        duration,
    )

    return RunSummary(
        total_documents=len(results),
        passed_documents=len(results) - error_documents - warning_documents,
        error_documents=error_documents,
        warning_documents=warning_documents,
        total_errors=counts["error"],
        total_warnings=counts["warning"],
        total_info=counts["info"],
        results=results,
        duration=duration,
    )

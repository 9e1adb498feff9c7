"""Uniqueness validator: near-duplicate and boilerplate checks for one page.

Each call fingerprints the page, stores it in the validator's corpus cache
and compares it with the pages validated before it.  Validating a whole
corpus therefore means calling :meth:`UniquenessValidator.validate` once per
page, in discovery order, on the same instance.

Issue codes
-----------
``UNIQ_001``
    The page is at least ``similarity_threshold`` percent similar to another
    page of the same category.  Severity comes from the config.

``UNIQ_002``
    The page contains phrases repeated across at least
    ``boilerplate_min_occurrences`` pages.  Always ``"info"``.
"""

import logging
import time
from typing import List, Optional

from uniquely.models.content import ContentRecord
from uniquely.models.validation import (
    SimilarityMatch,
    ValidationIssue,
    ValidationResult,
    ValidatorConfig,
)
from uniquely.services.boilerplate import boilerplate_in_document, find_repeating_phrases
from uniquely.services.cache import CorpusCache
from uniquely.services.extractor import document_text
from uniquely.services.fingerprint import fingerprint as make_fingerprint
from uniquely.services.normalizer import normalize_text
from uniquely.services.similarity import scan_similar

logger = logging.getLogger(__name__)

SIMILARITY_CODE = "UNIQ_001"
BOILERPLATE_CODE = "UNIQ_002"

_MAX_REPORTED_MATCHES = 3
_MAX_REPORTED_PHRASES = 5


class UniquenessValidator:
    name = "uniqueness"
    description = "Checks content uniqueness using n-gram fingerprinting and Jaccard similarity"

    def __init__(self, cache: Optional[CorpusCache] = None) -> None:
        self.cache = cache if cache is not None else CorpusCache()

    def clear_cache(self) -> None:
        """Forget every page seen so far (start of a new corpus run)."""
        self.cache.clear()

    def cache_size(self) -> int:
        return len(self.cache)

    def validate(
        self, record: ContentRecord, config: Optional[ValidatorConfig] = None
    ) -> ValidationResult:
        config = config or ValidatorConfig()
        thresholds = config.thresholds
        start = time.perf_counter()
        issues: List[ValidationIssue] = []

        text = normalize_text(document_text(record))
        fingerprint = make_fingerprint(text)

        with self.cache.lock:
            self.cache.put(record.identifier, fingerprint, text, record.category)
            similar = scan_similar(
                record.identifier,
                fingerprint,
                record.category,
                self.cache,
                thresholds.similarity_threshold,
            )
            corpus_size = len(self.cache)
            texts = self.cache.texts()

        if similar:
            issues.append(_similarity_issue(similar, config))

        if corpus_size >= thresholds.boilerplate_min_occurrences:
            phrases = find_repeating_phrases(
                texts,
                thresholds.boilerplate_min_phrase_length,
                thresholds.boilerplate_min_occurrences,
            )
            found = boilerplate_in_document(record.identifier, phrases)
            if found:
                issues.append(
                    ValidationIssue(
                        severity="info",
                        code=BOILERPLATE_CODE,
                        message=f"Found {len(found)} potential boilerplate phrase(s)",
                        suggestion=(
                            "Consider rephrasing repeated content to improve "
                            "uniqueness and SEO value."
                        ),
                        details={
                            "boilerplate_phrases": found[:_MAX_REPORTED_PHRASES],
                            "total_found": len(found),
                        },
                    )
                )

        duration = (time.perf_counter() - start) * 1000
        passed = not any(issue.severity == "error" for issue in issues)
        logger.debug(
            "Validated %s (%s): %d shingles, %d similar, %d issue(s) in %.1f ms",
            record.identifier,
            record.category,
            len(fingerprint),
            len(similar),
            len(issues),
            duration,
        )

        return ValidationResult(
            identifier=record.identifier,
            category=record.category,
            validator=self.name,
            passed=passed,
            issues=issues,
            metrics={
                "ngram_count": len(fingerprint),
                "similar_documents_count": len(similar),
                "max_similarity": similar[0].similarity if similar else 0.0,
            },
            duration=duration,
        )


def _display_name(identifier: str) -> str:
    return identifier.rstrip("/").split("/")[-1] or identifier


def _similarity_issue(similar: List[SimilarityMatch], config: ValidatorConfig) -> ValidationIssue:
    top = similar[:_MAX_REPORTED_MATCHES]
    return ValidationIssue(
        severity=config.severity,
        code=SIMILARITY_CODE,
        message=f"Content is {top[0].similarity:.1f}% similar to {_display_name(top[0].identifier)}",
        suggestion=(
            "Add more unique content specific to this page. Differentiate "
            "headings, descriptions, and key points."
        ),
        details={
            "similar_documents": [match.model_dump() for match in top],
            "threshold": config.thresholds.similarity_threshold,
        },
    )

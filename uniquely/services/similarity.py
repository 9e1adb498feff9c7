import logging
from typing import AbstractSet, List

from uniquely.models.content import ContentCategory
from uniquely.models.validation import SimilarityMatch
from uniquely.services.cache import CorpusCache
from uniquely.services.fingerprint import similarity_percent

logger = logging.getLogger(__name__)


def scan_similar(
    identifier: str,
    fingerprint: AbstractSet[str],
    category: ContentCategory,
    cache: CorpusCache,
    threshold: float = 70,
) -> List[SimilarityMatch]:
    """Compare *fingerprint* against every cached page of the same category.

    Args:
        identifier: Page being validated; its own cache entry is skipped.
        fingerprint: 3-gram fingerprint of that page.
        category: Only cached pages of this category are compared.
        cache: Corpus cache holding the previously validated pages.
        threshold: Minimum similarity percentage (inclusive) for a match.

    Returns:
        Matches at or above *threshold*, highest similarity first.  Equal
        scores are ordered by identifier.  A page too short to fingerprint
        never matches and is never matched.
    """
    matches: List[SimilarityMatch] = []
    if not fingerprint:
        return matches

    compared = 0
    for entry in cache.entries(category, exclude=identifier):
        if not entry.fingerprint:
            continue
        compared += 1
        similarity = similarity_percent(fingerprint, entry.fingerprint)
        if similarity >= threshold:
            matches.append(SimilarityMatch(identifier=entry.identifier, similarity=similarity))

    matches.sort(key=lambda m: (-m.similarity, m.identifier))
    logger.debug(
        "Similarity scan for %s: %d compared, %d at or above %s%%",
        identifier,
        compared,
        len(matches),
        threshold,
    )
    return matches

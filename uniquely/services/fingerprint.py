"""N-gram shingling and Jaccard similarity.

A document's *fingerprint* is the set of every run of three consecutive words
in its normalised text.  Two pages built from the same template share most of
their shingles, so the Jaccard index of their fingerprints approaches 1.
"""

from typing import AbstractSet, FrozenSet

from uniquely.services.normalizer import split_words

FINGERPRINT_NGRAM = 3


def shingles(text: str, n: int = FINGERPRINT_NGRAM) -> FrozenSet[str]:
    """Return the set of overlapping *n*-word windows of *text*.

    Texts with fewer than *n* words yield an empty set.  Repeated windows are
    stored once.
    """
    words = split_words(text)
    return frozenset(" ".join(words[i : i + n]) for i in range(len(words) - n + 1))


def fingerprint(text: str) -> FrozenSet[str]:
    return shingles(text, FINGERPRINT_NGRAM)


def jaccard_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Return ``|a ∩ b| / |a ∪ b|``, or ``0.0`` when both sets are empty."""
    if not a and not b:
        return 0.0
    intersection = len(a & b)
    union = len(a) + len(b) - intersection
    return intersection / union if union else 0.0


def similarity_percent(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Jaccard similarity as a percentage (0–100).

    Computed as ``|a ∩ b| * 100 / |a ∪ b|`` so whole-number ratios such as
    29 of 100 come out exact and compare correctly against a threshold.
    """
    intersection = len(a & b)
    union = len(a) + len(b) - intersection
    return intersection * 100 / union if union else 0.0

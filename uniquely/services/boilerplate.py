"""Cross-page boilerplate phrase detection.

Generated pages often share templated sentences ("fully insured gas safe
engineers covering the whole county") that survive even when the rest of
the page is rewritten.  This module finds word sequences that recur across
enough distinct pages of the corpus to count as boilerplate, ignoring
phrases that are common English filler rather than template copy.
"""

import re
from collections import defaultdict
from typing import Dict, List, Mapping, Set

from uniquely.services.normalizer import split_words

# Phrases matching any of these are too generic to flag
_GENERIC_PATTERNS = [
    re.compile(r"^(the|a|an|and|or|but|in|on|at|to|for)\s"),
    re.compile(r"\s(the|a|an|and|or|but)\s"),
    re.compile(r"^we (are|have|provide|offer)"),
    re.compile(r"^our (team|service|company)"),
    re.compile(r"^contact us"),
    re.compile(r"^free quote"),
]


def is_generic_phrase(phrase: str) -> bool:
    """Return True when *phrase* is filler rather than template copy."""
    return any(pattern.search(phrase) for pattern in _GENERIC_PATTERNS)


def find_repeating_phrases(
    texts: Mapping[str, str],
    min_phrase_length: int = 5,
    min_occurrences: int = 3,
) -> Dict[str, Set[str]]:
    """Find phrases shared by at least *min_occurrences* distinct pages.

    Args:
        texts:             Identifier → page text for the whole corpus.
        min_phrase_length: Words per phrase (default: 5).
        min_occurrences:   Distinct pages a phrase must appear in (default: 3).

    Returns:
        Mapping of each boilerplate phrase to the identifiers containing it.
    """
    occurrences: Dict[str, Set[str]] = defaultdict(set)
    for identifier, text in texts.items():
        words = split_words(text)
        for i in range(len(words) - min_phrase_length + 1):
            phrase = " ".join(words[i : i + min_phrase_length])
            if is_generic_phrase(phrase):
                continue
            occurrences[phrase].add(identifier)

    return {
        phrase: identifiers
        for phrase, identifiers in occurrences.items()
        if len(identifiers) >= min_occurrences
    }


def boilerplate_in_document(identifier: str, phrases: Mapping[str, Set[str]]) -> List[str]:
    """Return the boilerplate phrases occurring in page *identifier*.

    Phrases shared by the most pages come first; ties are alphabetical.
    """
    found = [phrase for phrase, identifiers in phrases.items() if identifier in identifiers]
    found.sort(key=lambda phrase: (-len(phrases[phrase]), phrase))
    return found

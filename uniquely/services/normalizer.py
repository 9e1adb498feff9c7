"""Text normalisation shared by fingerprinting and boilerplate detection."""

import re
from typing import List

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase *text*, blank out punctuation and collapse whitespace.

    Every character outside ``[a-z0-9]`` and whitespace becomes a space, so
    ``"don't"`` yields ``"don t"``.  Empty input returns ``""``.
    """
    text = _NON_ALNUM_RE.sub(" ", text.lower())
    # \s also matches non-ASCII whitespace such as NBSP
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def split_words(text: str) -> List[str]:
    """Return the words of the normalised form of *text*."""
    normalized = normalize_text(text)
    return normalized.split(" ") if normalized else []

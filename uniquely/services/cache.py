"""In-memory corpus cache backing cross-page comparison.

The cache grows by one entry per validated page and is never evicted; a
host clears it between independent corpus runs.  Re-validating an
identifier replaces its entry.
"""

import threading
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, Optional

from uniquely.models.content import ContentCategory


@dataclass(frozen=True)
class CacheEntry:
    identifier: str
    fingerprint: FrozenSet[str]
    text: str  # normalised
    category: ContentCategory


class CorpusCache:
    """Identifier-keyed store of fingerprints and normalised texts."""

    def __init__(self) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        # Held by callers around put-then-scan when validating from several threads
        self.lock = threading.RLock()

    def put(
        self,
        identifier: str,
        fingerprint: FrozenSet[str],
        text: str,
        category: ContentCategory,
    ) -> CacheEntry:
        entry = CacheEntry(identifier, frozenset(fingerprint), text, category)
        with self.lock:
            self._entries[identifier] = entry
        return entry

    def get(self, identifier: str) -> Optional[CacheEntry]:
        return self._entries.get(identifier)

    def entries(
        self, category: Optional[ContentCategory] = None, exclude: Optional[str] = None
    ) -> Iterator[CacheEntry]:
        """Iterate cached entries, optionally limited to *category* and skipping *exclude*."""
        for entry in list(self._entries.values()):
            if entry.identifier == exclude:
                continue
            if category is not None and entry.category != category:
                continue
            yield entry

    def texts(self) -> Dict[str, str]:
        """Return identifier → normalised text for every cached page."""
        return {identifier: entry.text for identifier, entry in self._entries.items()}

    def clear(self) -> None:
        with self.lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

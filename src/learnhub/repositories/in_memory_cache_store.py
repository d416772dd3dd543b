"""In-process implementation of CacheStore.

Entries live in one dictionary per tier and are deep-copied on the way in
and out, so callers never share a cached object. Expiry is lazy: stale
entries are dropped when they are read or counted.
"""

import copy
import time
from collections.abc import Callable
from typing import Any

from learnhub.entities import CacheEntryEntity, CacheTier


class InMemoryCacheStore:
    """Dictionary-backed implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Each entry is replaced atomically on `set`, so concurrent fills of the
    same key simply leave the last writer's value in place.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        """Initialize the store.

        Args:
            clock: Returns the current Unix time. Defaults to time.time.
        """
        self._clock = clock or time.time
        self._entries: dict[CacheTier, dict[str, CacheEntryEntity]] = {tier: {} for tier in CacheTier}

    @classmethod
    def create(cls) -> "InMemoryCacheStore":
        """Factory method to create InMemoryCacheStore with defaults."""
        return cls()

    def get(self, tier: CacheTier, key: str) -> Any | None:
        entries = self._entries[tier]
        entry = entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            entries.pop(key, None)
            return None
        return copy.deepcopy(entry.value)

    def set(self, tier: CacheTier, key: str, value: Any, ttl: int) -> None:
        self._entries[tier][key] = CacheEntryEntity(
            key=key,
            value=copy.deepcopy(value),
            expires_at=self._clock() + ttl,
        )

    def flush(self, tier: CacheTier) -> int:
        count = len(self._entries[tier])
        self._entries[tier] = {}
        return count

    def count(self, tier: CacheTier) -> int:
        """Count live entries, purging expired ones."""
        now = self._clock()
        entries = self._entries[tier]
        for key in [k for k, entry in entries.items() if entry.is_expired(now)]:
            del entries[key]
        return len(entries)

    def health_check(self) -> bool:
        return True

"""Cache entry domain entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CacheTier(str, Enum):
    """Named cache partition.

    Tiers differ only by their time-to-live. The TTL values themselves come
    from settings; the enum carries the names.
    """

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a cached response payload.

    Attributes:
        key: Key derived from the request route and parameters
        value: The cached payload (must be JSON serializable)
        expires_at: Unix timestamp after which the entry is stale
    """

    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Whether the entry must no longer be served at time `now`."""
        return now >= self.expires_at

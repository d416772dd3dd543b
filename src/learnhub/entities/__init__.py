"""Domain entities for internal representation.

These are pure dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .cache_entry import CacheEntryEntity, CacheTier
from .catalog import CourseEntity, NoteEntity, SummaryEntity
from .summary import BatchItem, BatchResult, ProviderOutcome, ProviderStatus, SummaryKind
from .tier_stats import TierStats

__all__ = [
    "CacheEntryEntity",
    "CacheTier",
    "TierStats",
    "CourseEntity",
    "NoteEntity",
    "SummaryEntity",
    "BatchItem",
    "BatchResult",
    "ProviderOutcome",
    "ProviderStatus",
    "SummaryKind",
]

"""Per-tier cache statistics."""

from dataclasses import dataclass


@dataclass
class TierStats:
    """Track hit/miss counters for one cache tier."""

    hits: int = 0
    misses: int = 0

    @property
    def total_lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_lookups == 0:
            return 0.0
        return self.hits / self.total_lookups

    def record_hit(self) -> None:
        self.hits += 1

    def record_miss(self) -> None:
        self.misses += 1

    def to_dict(self, keys: int) -> dict[str, float | int]:
        """Convert counters to a dictionary, with the tier's current key count."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "keys": keys,
            "hit_rate": self.hit_rate,
        }

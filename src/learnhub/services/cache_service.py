"""Tiered response cache service.

This service sits between the route layer and the cache store. It owns the
tier TTLs and the hit/miss counters, and turns store faults into cache misses
so a broken backend never fails a request.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from learnhub.config import settings
from learnhub.entities import CacheTier, TierStats
from learnhub.exceptions import CacheBackendError
from learnhub.log import get_logger
from learnhub.protocols import CacheStore
from learnhub.services.cache_keys import CacheRequest, KeyFn

logger = get_logger(__name__)

Compute = Callable[[], Any]
Interceptor = Callable[[CacheRequest, Compute], Awaitable[Any]]

ALL_TIERS = "all"


def is_successful(result: Any) -> bool:
    """Whether a computed result may be cached.

    None is never cached. Objects carrying an HTTP `status_code` are only
    cached when it is 200.
    """
    if result is None:
        return False
    status_code = getattr(result, "status_code", None)
    return status_code is None or status_code == 200


class CacheService:
    """Core cache orchestration service.

    This service depends on the CacheStore PROTOCOL, not a concrete
    implementation: the store can be in-process dictionaries or Redis.

    Example:
        ```python
        from learnhub.repositories import InMemoryCacheStore
        from learnhub.services import CacheService

        cache = CacheService.create(store=InMemoryCacheStore())

        cached = cache.wrap(CacheTier.MEDIUM, course_list_key)
        courses = await cached(CacheRequest.get(), load_courses)

        # After a write
        cache.flush("all")
        ```
    """

    def __init__(
        self,
        store: CacheStore,
        ttls: dict[CacheTier, int] | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            store: Cache storage backend (required).
            ttls: TTL in seconds per tier. Defaults to settings.
        """
        self._store = store
        self._ttls = ttls or {CacheTier(name): ttl for name, ttl in settings.tier_ttls.items()}
        self._stats: dict[CacheTier, TierStats] = {tier: TierStats() for tier in CacheTier}

        missing = [tier.value for tier in CacheTier if tier not in self._ttls]
        if missing:
            raise ValueError(f"Missing TTL for tiers: {missing}")

        for tier, ttl in self._ttls.items():
            if ttl <= 0:
                raise ValueError(f"TTL for tier {CacheTier(tier).value} must be positive, got {ttl}")

    @classmethod
    def create(
        cls,
        store: CacheStore,
        ttls: dict[CacheTier, int] | None = None,
    ) -> "CacheService":
        """Factory method to create CacheService with settings defaults.

        Args:
            store: Cache storage backend (required).
            ttls: TTL per tier. If None, uses settings.

        Returns:
            Configured CacheService instance
        """
        return cls(store=store, ttls=ttls)

    def ttl(self, tier: CacheTier) -> int:
        return self._ttls[tier]

    def lookup(self, tier: CacheTier, key: str) -> Any | None:
        """Return the live cached value for `key`, or None.

        A backend failure is logged and reported as a miss.
        """
        try:
            value = self._store.get(tier, key)
        except CacheBackendError as e:
            logger.warning("Cache lookup failed for %s:%s, treating as miss: %s", tier.value, key, e)
            value = None

        if value is None:
            self._stats[tier].record_miss()
        else:
            self._stats[tier].record_hit()
        return value

    def store(self, tier: CacheTier, key: str, value: Any) -> bool:
        """Store `value` under `key`, resetting its expiry to now + tier TTL.

        Returns:
            True if stored, False if the backend failed
        """
        try:
            self._store.set(tier, key, value, self._ttls[tier])
        except CacheBackendError as e:
            logger.warning("Cache store failed for %s:%s: %s", tier.value, key, e)
            return False
        logger.debug("Cache set for key: %s (%s)", key, tier.value)
        return True

    def wrap(
        self,
        tier: CacheTier,
        key_fn: KeyFn,
        success: Callable[[Any], bool] = is_successful,
    ) -> Interceptor:
        """Build a read-through interceptor for one cached route.

        The returned coroutine function takes the request descriptor and a
        zero-argument `compute` callable (sync or async). On a hit the cached
        value is returned and `compute` is not called. On a miss `compute`
        runs; its result is stored only if `success(result)` holds.
        Exceptions raised by `compute` propagate and are never cached.

        Args:
            tier: Tier the route is bound to
            key_fn: Pure function deriving the cache key from the request
            success: Predicate deciding whether a result is cacheable

        Returns:
            async (request, compute) -> value
        """

        async def intercept(request: CacheRequest, compute: Compute) -> Any:
            key = key_fn(request)

            cached = self.lookup(tier, key)
            if cached is not None:
                logger.debug("Cache hit for key: %s", key)
                return cached

            result = compute()
            if inspect.isawaitable(result):
                result = await result

            if success(result):
                self.store(tier, key, result)
            return result

        return intercept

    def _resolve_tiers(self, target: CacheTier | str) -> list[CacheTier]:
        if target == ALL_TIERS:
            return list(CacheTier)
        try:
            return [CacheTier(target)]
        except ValueError as e:
            valid = [t.value for t in CacheTier] + [ALL_TIERS]
            raise ValueError(f"Unknown cache tier {target!r}, expected one of {valid}") from e

    def flush(self, target: CacheTier | str = ALL_TIERS) -> int:
        """Clear a tier, or every tier with "all".

        Returns:
            Number of entries removed (backend failures count as zero)
        """
        removed = 0
        for tier in self._resolve_tiers(target):
            try:
                removed += self._store.flush(tier)
            except CacheBackendError as e:
                logger.warning("Cache flush failed for tier %s: %s", tier.value, e)
        logger.debug("Flushed %d cache entries (%s)", removed, target)
        return removed

    def flush_tiers(self, tiers: tuple[CacheTier, ...]) -> int:
        """Flush several tiers at once (used for write invalidation)."""
        return sum(self.flush(tier) for tier in tiers)

    def stats(self) -> dict[str, dict[str, float | int]]:
        """Get per-tier statistics.

        Returns:
            {tier: {hits, misses, keys, hit_rate}}
        """
        result = {}
        for tier in CacheTier:
            try:
                keys = self._store.count(tier)
            except CacheBackendError as e:
                logger.warning("Cache count failed for tier %s: %s", tier.value, e)
                keys = 0
            result[tier.value] = self._stats[tier].to_dict(keys)
        return result

    def is_healthy(self) -> bool:
        return self._store.health_check()

    @property
    def backend(self) -> CacheStore:
        """Get the underlying store (for testing)."""
        return self._store

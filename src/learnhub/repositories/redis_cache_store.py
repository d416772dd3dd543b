"""Redis implementation of CacheStore.

Entries are stored as JSON strings under `{prefix}:{tier}:{key}` and expire
through native Redis TTLs. Every Redis failure is re-raised as
CacheBackendError so the cache service can fail open.
"""

import json
from typing import Any

import redis

from learnhub.config import get_redis_client, settings
from learnhub.entities import CacheTier
from learnhub.exceptions import CacheBackendError


class RedisCacheStore:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Namespace prepended to every key. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            key_prefix: Key namespace. If None, uses settings.

        Returns:
            Configured RedisCacheStore
        """
        return cls(key_prefix=key_prefix)

    def _full_key(self, tier: CacheTier, key: str) -> str:
        return f"{self._prefix}:{tier.value}:{key}"

    def _tier_pattern(self, tier: CacheTier) -> str:
        return f"{self._prefix}:{tier.value}:*"

    def get(self, tier: CacheTier, key: str) -> Any | None:
        try:
            raw = self._client.get(self._full_key(tier, key))
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis GET failed: {e}") from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise CacheBackendError(f"Undecodable cache value for {key!r}: {e}") from e

    def set(self, tier: CacheTier, key: str, value: Any, ttl: int) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise CacheBackendError(f"Value for {key!r} is not JSON serializable: {e}") from e

        try:
            self._client.set(self._full_key(tier, key), payload, ex=ttl)
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis SET failed: {e}") from e

    def flush(self, tier: CacheTier) -> int:
        try:
            keys = list(self._client.scan_iter(match=self._tier_pattern(tier)))
            if not keys:
                return 0
            deleted: int = self._client.delete(*keys)  # type: ignore[assignment]
            return deleted
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis flush failed: {e}") from e

    def count(self, tier: CacheTier) -> int:
        try:
            return sum(1 for _ in self._client.scan_iter(match=self._tier_pattern(tier)))
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis SCAN failed: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client

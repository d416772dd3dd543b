"""Cache storage protocol.

Defines the interface for any tiered key-value store that can hold response
payloads with a time-to-live.

Implementations include:
- In-process dictionaries (default)
- Redis
"""

from typing import Any, Protocol, runtime_checkable

from learnhub.entities import CacheTier


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Tiers are independent namespaces: the same key in two tiers refers to
    two unrelated entries. Implementations raise CacheBackendError on any
    storage fault.

    Example:
        ```python
        from learnhub.protocols import CacheStore

        store: CacheStore = InMemoryCacheStore()
        store: CacheStore = RedisCacheStore.create()
        ```
    """

    def get(self, tier: CacheTier, key: str) -> Any | None:
        """Return the live value stored under `key`, or None.

        Args:
            tier: The cache tier
            key: The cache key

        Returns:
            The cached payload, or None when absent or expired
        """
        ...

    def set(self, tier: CacheTier, key: str, value: Any, ttl: int) -> None:
        """Store `value` under `key`, replacing any previous entry.

        Args:
            tier: The cache tier
            key: The cache key
            value: JSON-serializable payload
            ttl: Time-to-live in seconds
        """
        ...

    def flush(self, tier: CacheTier) -> int:
        """Remove every entry of a tier.

        Returns:
            Number of entries removed
        """
        ...

    def count(self, tier: CacheTier) -> int:
        """Count live entries in a tier."""
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

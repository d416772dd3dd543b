"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.

Usage:
    ```python
    from learnhub.protocols import CacheStore, SummarizationProvider

    store: CacheStore = InMemoryCacheStore()       # works
    store: CacheStore = RedisCacheStore.create()   # also works
    ```
"""

from .cache_store import CacheStore
from .summarization_provider import SummarizationProvider

__all__ = [
    "CacheStore",
    "SummarizationProvider",
]

"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the inference API, the
catalog store) behind protocol-based interfaces. This enables:
- Easy swapping of implementations (in-memory → Redis, Hugging Face → other)
- Unit testing with mock implementations
- Clear separation of concerns
"""

from learnhub.protocols import CacheStore, SummarizationProvider

from .huggingface_provider import HuggingFaceSummarizationProvider
from .in_memory_cache_store import InMemoryCacheStore
from .in_memory_catalog import InMemoryCatalogRepository
from .redis_cache_store import RedisCacheStore

__all__ = [
    "CacheStore",
    "SummarizationProvider",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "HuggingFaceSummarizationProvider",
    "InMemoryCatalogRepository",
]

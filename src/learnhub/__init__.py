"""LearnHub - tiered response caching and AI summarization for a learning platform.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CacheStore, SummarizationProvider)
    - repositories: Data access implementations
    - services: Business logic (tiered cache, summarization with fallbacks)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from learnhub.repositories import InMemoryCacheStore, HuggingFaceSummarizationProvider
    from learnhub.services import CacheService, SummarizationService

    cache = CacheService.create(store=InMemoryCacheStore.create())
    summarizer = SummarizationService.create(provider=HuggingFaceSummarizationProvider.create())
    ```

For HTTP API:
    ```python
    from learnhub.api.app import app
    ```
"""

from learnhub.config import get_redis_client, settings
from learnhub.entities import CacheTier, SummaryKind
from learnhub.exceptions import (
    CacheBackendError,
    InvalidInputError,
    LearnHubError,
    ProviderCallFailedError,
    ProviderUnavailableError,
)
from learnhub.protocols import CacheStore, SummarizationProvider
from learnhub.repositories import (
    HuggingFaceSummarizationProvider,
    InMemoryCacheStore,
    RedisCacheStore,
)
from learnhub.services import CacheRequest, CacheService, SummarizationService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "SummarizationProvider",
    # Services (business logic)
    "CacheService",
    "CacheRequest",
    "SummarizationService",
    # Repositories (data access)
    "InMemoryCacheStore",
    "RedisCacheStore",
    "HuggingFaceSummarizationProvider",
    # Entities (domain models)
    "CacheTier",
    "SummaryKind",
    # Errors
    "LearnHubError",
    "InvalidInputError",
    "ProviderUnavailableError",
    "ProviderCallFailedError",
    "CacheBackendError",
]

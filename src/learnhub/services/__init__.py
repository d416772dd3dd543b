"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from learnhub.services import CacheService, SummarizationService

    cache = CacheService.create(store=InMemoryCacheStore())
    summarizer = SummarizationService.create(provider=HuggingFaceSummarizationProvider.create())
    ```
"""

from .cache_keys import CacheRequest
from .cache_service import CacheService
from .summarization_service import SummarizationService

__all__ = [
    "CacheRequest",
    "CacheService",
    "SummarizationService",
]

"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from learnhub.config import settings
from learnhub.handlers import CacheHandler, CatalogHandler, SummaryHandler
from learnhub.log import get_logger
from learnhub.protocols import CacheStore
from learnhub.repositories import (
    HuggingFaceSummarizationProvider,
    InMemoryCacheStore,
    InMemoryCatalogRepository,
    RedisCacheStore,
)
from learnhub.services import CacheService, SummarizationService

logger = get_logger(__name__)


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check lifespan setup.")
    return value


def get_cache_handler(request: Request) -> CacheHandler:
    """Dependency injection for CacheHandler from app.state."""
    return _state_attr(request, "cache_handler")


def get_summary_handler(request: Request) -> SummaryHandler:
    """Dependency injection for SummaryHandler from app.state."""
    return _state_attr(request, "summary_handler")


def get_catalog_handler(request: Request) -> CatalogHandler:
    """Dependency injection for CatalogHandler from app.state."""
    return _state_attr(request, "catalog_handler")


def build_cache_store() -> CacheStore:
    """Create the cache backend selected by CACHE_BACKEND."""
    if settings.cache_backend == "redis":
        return RedisCacheStore.create()
    return InMemoryCacheStore.create()


def build_lifespan(
    cache_service: CacheService | None = None,
    summarization_service: SummarizationService | None = None,
    catalog: InMemoryCatalogRepository | None = None,
):
    """Build the lifespan context manager for the FastAPI app.

    Services passed in are used as-is (tests inject their own); anything
    missing is created from settings.

    Args:
        cache_service: Pre-built cache service
        summarization_service: Pre-built summarization service
        catalog: Pre-built catalog repository

    Returns:
        An async context manager factory suitable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize all layers and store them in app.state.

        Cleanup:
            Closes the provider HTTP client and removes services from app.state
        """
        cache = cache_service or CacheService.create(store=build_cache_store())
        summarizer = summarization_service or SummarizationService.create(
            provider=HuggingFaceSummarizationProvider.create(),
        )
        repository = catalog or InMemoryCatalogRepository.create()

        app.state.cache_service = cache
        app.state.summarization_service = summarizer
        app.state.catalog = repository
        app.state.cache_handler = CacheHandler(cache_service=cache, summarization_service=summarizer)
        app.state.summary_handler = SummaryHandler(summarization_service=summarizer)
        app.state.catalog_handler = CatalogHandler(
            catalog=repository,
            cache_service=cache,
            summarization_service=summarizer,
        )

        provider_status = summarizer.test_connection()
        logger.info("Cache backend: %s (healthy: %s)", type(cache.backend).__name__, cache.is_healthy())
        logger.info(
            "Summarizer: %s / %s (configured: %s)",
            provider_status.provider,
            provider_status.model,
            provider_status.available,
        )

        yield

        close = getattr(summarizer.provider, "close", None)
        if close is not None:
            await close()

        for name in (
            "catalog_handler",
            "summary_handler",
            "cache_handler",
            "catalog",
            "summarization_service",
            "cache_service",
        ):
            delattr(app.state, name)
        logger.info("Services shut down")

    return lifespan


# Type aliases for cleaner dependency injection
CacheHandlerDep = Annotated[CacheHandler, Depends(get_cache_handler)]
SummaryHandlerDep = Annotated[SummaryHandler, Depends(get_summary_handler)]
CatalogHandlerDep = Annotated[CatalogHandler, Depends(get_catalog_handler)]

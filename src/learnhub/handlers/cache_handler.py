"""HTTP handlers for cache administration.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from learnhub.dto import CacheFlushResponse, CacheStatsResponse, HealthCheckResponse, TierStatsItem
from learnhub.services import CacheService, SummarizationService


class CacheHandler:
    """HTTP handlers for cache statistics, flushing and health.

    Example:
        ```python
        handler = CacheHandler(cache_service=cache_service, summarization_service=summarizer)

        @app.get("/cache/stats", response_model=CacheStatsResponse)
        async def cache_stats():
            return await handler.get_stats()
        ```
    """

    def __init__(
        self,
        cache_service: CacheService,
        summarization_service: SummarizationService,
    ) -> None:
        """Initialize the cache handler.

        Args:
            cache_service: The tiered cache service (required).
            summarization_service: Used to report provider status in health checks.
        """
        self._cache = cache_service
        self._summarizer = summarization_service

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        stats = self._cache.stats()
        return CacheStatsResponse(
            tiers={tier: TierStatsItem(**values) for tier, values in stats.items()},
        )

    async def flush(self, tier: str) -> CacheFlushResponse:
        """Handle DELETE /cache/{tier} requests.

        Raises:
            HTTPException: 400 if the tier name is unknown
        """
        try:
            count = self._cache.flush(tier)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            ) from e

        return CacheFlushResponse(
            success=True,
            tier=tier,
            deleted_count=count,
            message="Cache cleared successfully",
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        The service stays usable without a remote summarizer, so only the
        cache backend decides between healthy and degraded.
        """
        cache_healthy = self._cache.is_healthy()
        return HealthCheckResponse(
            status="healthy" if cache_healthy else "degraded",
            cache_healthy=cache_healthy,
            summarizer_configured=self._summarizer.is_configured,
        )

"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class SummaryResponse(BaseModel):
    """Response DTO for text summaries (standard and bullet points)."""

    summary: str = Field(..., description="The generated summary")
    type: str = Field(..., description="Summary kind")


class ConceptsResponse(BaseModel):
    """Response DTO for key concept extraction."""

    concepts: list[str] = Field(default_factory=list, description="Key terms, most relevant first")


class QuestionsResponse(BaseModel):
    """Response DTO for study questions."""

    questions: list[str] = Field(default_factory=list, description="Numbered study questions")


class BatchSuccessItem(BaseModel):
    note_id: str
    summary: str
    success: bool = True


class BatchFailureItem(BaseModel):
    note_id: str
    error: str


class BatchSummaryResponse(BaseModel):
    """Response DTO for batch summarization."""

    successful: list[BatchSuccessItem] = Field(default_factory=list)
    failed: list[BatchFailureItem] = Field(default_factory=list)
    total_processed: int = Field(..., ge=0)
    success_rate: str = Field(..., description='Percentage with one decimal, e.g. "66.7%"')


class ProviderStatusResponse(BaseModel):
    """Response DTO for the summarization provider status."""

    success: bool = True
    provider: str
    configured: bool
    model: str
    endpoint: str
    api_key: str = Field(..., description="'configured' or 'not configured'")


class TierStatsItem(BaseModel):
    """Statistics of one cache tier."""

    hits: int = Field(..., ge=0)
    misses: int = Field(..., ge=0)
    keys: int = Field(..., ge=0)
    hit_rate: float = Field(..., ge=0.0, le=1.0)


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    tiers: dict[str, TierStatsItem] = Field(..., description="Statistics keyed by tier name")


class CacheFlushResponse(BaseModel):
    """Response DTO for cache flush operation."""

    success: bool
    tier: str
    deleted_count: int
    message: str


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    summarizer_configured: bool = Field(
        ...,
        description="Whether remote summarization is configured (fallback is used otherwise)",
    )


class CourseResponse(BaseModel):
    id: str
    title: str
    description: str


class NoteResponse(BaseModel):
    id: str
    course_id: str
    title: str
    content: str


class StoredSummaryResponse(BaseModel):
    """A summary persisted for a note."""

    id: str
    note_id: str
    type: str
    content: str
    created_at: float

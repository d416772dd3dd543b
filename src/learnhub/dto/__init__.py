"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    BatchNoteItem,
    BatchSummarizeRequest,
    CreateCourseRequest,
    CreateNoteRequest,
    GenerateSummaryRequest,
    StudyQuestionsRequest,
    SummarizeRequest,
    TextRequest,
)
from .responses import (
    BatchFailureItem,
    BatchSuccessItem,
    BatchSummaryResponse,
    CacheFlushResponse,
    CacheStatsResponse,
    ConceptsResponse,
    CourseResponse,
    HealthCheckResponse,
    NoteResponse,
    ProviderStatusResponse,
    QuestionsResponse,
    StoredSummaryResponse,
    SummaryResponse,
    TierStatsItem,
)

__all__ = [
    "BatchNoteItem",
    "BatchSummarizeRequest",
    "CreateCourseRequest",
    "CreateNoteRequest",
    "GenerateSummaryRequest",
    "StudyQuestionsRequest",
    "SummarizeRequest",
    "TextRequest",
    "BatchFailureItem",
    "BatchSuccessItem",
    "BatchSummaryResponse",
    "CacheFlushResponse",
    "CacheStatsResponse",
    "ConceptsResponse",
    "CourseResponse",
    "HealthCheckResponse",
    "NoteResponse",
    "ProviderStatusResponse",
    "QuestionsResponse",
    "StoredSummaryResponse",
    "SummaryResponse",
    "TierStatsItem",
]

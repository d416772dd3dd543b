from typing import Any, Literal

from fastapi import APIRouter, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from learnhub.api.dependencies import (
    CacheHandlerDep,
    CatalogHandlerDep,
    SummaryHandlerDep,
    build_lifespan,
)
from learnhub.config import settings
from learnhub.dto import (
    BatchSummarizeRequest,
    BatchSummaryResponse,
    CacheFlushResponse,
    CacheStatsResponse,
    ConceptsResponse,
    CourseResponse,
    CreateCourseRequest,
    CreateNoteRequest,
    GenerateSummaryRequest,
    HealthCheckResponse,
    NoteResponse,
    ProviderStatusResponse,
    QuestionsResponse,
    StoredSummaryResponse,
    StudyQuestionsRequest,
    SummarizeRequest,
    SummaryResponse,
    TextRequest,
)
from learnhub.repositories import InMemoryCatalogRepository
from learnhub.services import CacheService, SummarizationService

API_NAME = "LearnHub API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "Learning platform backend with tiered response caching and AI summaries"

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "endpoints": {
            "courses": "/courses",
            "notes": "/notes",
            "ai": "/ai",
            "cache": "/cache/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@router.get("/health", response_model=HealthCheckResponse)
async def health(handler: CacheHandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


# Cache administration


@router.get("/cache/stats", response_model=CacheStatsResponse)
async def cache_stats(handler: CacheHandlerDep) -> CacheStatsResponse:
    """Per-tier hit/miss counters and key counts."""
    return await handler.get_stats()


@router.delete("/cache/{tier}", response_model=CacheFlushResponse)
async def flush_cache(
    tier: Literal["short", "medium", "long", "all"],
    handler: CacheHandlerDep,
) -> CacheFlushResponse:
    """Flush one tier, or all of them."""
    return await handler.flush(tier)


# AI summarization


@router.post("/ai/summarize", response_model=SummaryResponse)
async def summarize(request: SummarizeRequest, handler: SummaryHandlerDep) -> SummaryResponse:
    return await handler.summarize(request)


@router.post("/ai/bullet-points", response_model=SummaryResponse)
async def bullet_points(request: TextRequest, handler: SummaryHandlerDep) -> SummaryResponse:
    return await handler.bullet_points(request)


@router.post("/ai/concepts", response_model=ConceptsResponse)
async def key_concepts(request: TextRequest, handler: SummaryHandlerDep) -> ConceptsResponse:
    return await handler.key_concepts(request)


@router.post("/ai/questions", response_model=QuestionsResponse)
async def study_questions(
    request: StudyQuestionsRequest,
    handler: SummaryHandlerDep,
) -> QuestionsResponse:
    return await handler.study_questions(request)


@router.post("/ai/batch", response_model=BatchSummaryResponse)
async def batch_summarize(
    request: BatchSummarizeRequest,
    handler: SummaryHandlerDep,
) -> BatchSummaryResponse:
    """Summarize several notes; per-note failures are reported in the body."""
    return await handler.batch(request)


@router.get("/ai/status", response_model=ProviderStatusResponse)
async def provider_status(handler: SummaryHandlerDep) -> ProviderStatusResponse:
    """Summarization provider configuration (no network call)."""
    return await handler.status()


# Catalog


@router.get("/courses", response_model=list[CourseResponse])
async def list_courses(handler: CatalogHandlerDep) -> list[dict]:
    return await handler.list_courses()


@router.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(request: CreateCourseRequest, handler: CatalogHandlerDep) -> dict:
    return await handler.create_course(request)


@router.get("/courses/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, handler: CatalogHandlerDep) -> dict:
    return await handler.get_course(course_id)


@router.get("/courses/{course_id}/notes", response_model=list[NoteResponse])
async def list_course_notes(course_id: str, handler: CatalogHandlerDep) -> list[dict]:
    return await handler.list_notes_by_course(course_id)


@router.get("/notes", response_model=list[NoteResponse])
async def list_notes(handler: CatalogHandlerDep) -> list[dict]:
    return await handler.list_notes()


@router.post("/notes", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(request: CreateNoteRequest, handler: CatalogHandlerDep) -> dict:
    return await handler.create_note(request)


@router.post(
    "/notes/{note_id}/summaries",
    response_model=StoredSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_note_summary(
    note_id: str,
    request: GenerateSummaryRequest,
    handler: CatalogHandlerDep,
) -> dict:
    return await handler.generate_summary(note_id, request)


@router.get("/notes/{note_id}/summaries/latest", response_model=StoredSummaryResponse)
async def latest_note_summary(note_id: str, handler: CatalogHandlerDep) -> dict:
    return await handler.latest_summary(note_id)


def create_app(
    cache_service: CacheService | None = None,
    summarization_service: SummarizationService | None = None,
    catalog: InMemoryCatalogRepository | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        cache_service: Pre-built cache service. If None, built from settings.
        summarization_service: Pre-built summarization service. If None, built from settings.
        catalog: Pre-built catalog repository. If None, an empty one is used.

    Returns:
        The configured FastAPI app
    """
    application = FastAPI(
        title=API_NAME,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=build_lifespan(cache_service, summarization_service, catalog),
    )

    application.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "learnhub.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )

"""HTTP handlers for the course catalog.

Read routes go through the tiered cache; write routes flush the tiers that
may hold stale copies of the written resource.
"""

from dataclasses import asdict

from fastapi import HTTPException, status

from learnhub.dto import CreateCourseRequest, CreateNoteRequest, GenerateSummaryRequest
from learnhub.entities import SummaryEntity
from learnhub.exceptions import InvalidInputError
from learnhub.repositories import InMemoryCatalogRepository
from learnhub.services import CacheRequest, CacheService, SummarizationService
from learnhub.services.cache_keys import INVALIDATION, ROUTE_TIERS


def _not_found(what: str, identifier: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} {identifier} not found")


def _summary_dict(summary: SummaryEntity) -> dict:
    return {
        "id": summary.id,
        "note_id": summary.note_id,
        "type": summary.kind,
        "content": summary.content,
        "created_at": summary.created_at,
    }


class CatalogHandler:
    """HTTP handlers for courses, notes and stored summaries.

    Cached handlers return plain dictionaries so that every cache backend
    can serialize them.
    """

    def __init__(
        self,
        catalog: InMemoryCatalogRepository,
        cache_service: CacheService,
        summarization_service: SummarizationService,
    ) -> None:
        """Initialize the catalog handler.

        Args:
            catalog: Course/note/summary storage (required).
            cache_service: Tiered cache for read routes (required).
            summarization_service: Used to generate note summaries (required).
        """
        self._catalog = catalog
        self._cache = cache_service
        self._summarizer = summarization_service
        self._cached = {
            route: cache_service.wrap(tier, key_fn) for route, (tier, key_fn) in ROUTE_TIERS.items()
        }

    # Courses

    async def list_courses(self) -> list[dict]:
        """Handle GET /courses requests."""
        return await self._cached["course_list"](
            CacheRequest.get(),
            lambda: [asdict(course) for course in self._catalog.list_courses()],
        )

    async def get_course(self, course_id: str) -> dict:
        """Handle GET /courses/{id} requests.

        Raises:
            HTTPException: 404 if the course does not exist (never cached)
        """

        def load() -> dict:
            course = self._catalog.get_course(course_id)
            if course is None:
                raise _not_found("Course", course_id)
            return asdict(course)

        return await self._cached["course_by_id"](CacheRequest.get(id=course_id), load)

    async def create_course(self, request: CreateCourseRequest) -> dict:
        """Handle POST /courses requests."""
        course = self._catalog.add_course(request.title, request.description)
        self._cache.flush_tiers(INVALIDATION["course"])
        return asdict(course)

    # Notes

    async def list_notes(self) -> list[dict]:
        """Handle GET /notes requests."""
        return await self._cached["note_list"](
            CacheRequest.get(),
            lambda: [asdict(note) for note in self._catalog.list_notes()],
        )

    async def list_notes_by_course(self, course_id: str) -> list[dict]:
        """Handle GET /courses/{course_id}/notes requests."""

        def load() -> list[dict]:
            if self._catalog.get_course(course_id) is None:
                raise _not_found("Course", course_id)
            return [asdict(note) for note in self._catalog.list_notes_by_course(course_id)]

        return await self._cached["notes_by_course"](CacheRequest.get(course_id=course_id), load)

    async def create_note(self, request: CreateNoteRequest) -> dict:
        """Handle POST /notes requests."""
        if self._catalog.get_course(request.course_id) is None:
            raise _not_found("Course", request.course_id)
        note = self._catalog.add_note(request.course_id, request.title, request.content)
        self._cache.flush_tiers(INVALIDATION["note"])
        return asdict(note)

    # Summaries

    async def generate_summary(self, note_id: str, request: GenerateSummaryRequest) -> dict:
        """Handle POST /notes/{id}/summaries requests."""
        note = self._catalog.get_note(note_id)
        if note is None:
            raise _not_found("Note", note_id)

        try:
            content = await self._summarizer.render(note.content, request.type, request.max_length)
        except InvalidInputError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

        summary = self._catalog.add_summary(note_id, request.type.value, content)
        self._cache.flush_tiers(INVALIDATION["summary"])
        return _summary_dict(summary)

    async def latest_summary(self, note_id: str) -> dict:
        """Handle GET /notes/{id}/summaries/latest requests."""

        def load() -> dict:
            summary = self._catalog.latest_summary(note_id)
            if summary is None:
                raise _not_found("Summary for note", note_id)
            return _summary_dict(summary)

        return await self._cached["summary_latest"](CacheRequest.get(id=note_id), load)

"""HTTP handlers for AI summarization endpoints."""

from fastapi import HTTPException, status

from learnhub.dto import (
    BatchSummarizeRequest,
    BatchSummaryResponse,
    ConceptsResponse,
    ProviderStatusResponse,
    QuestionsResponse,
    StudyQuestionsRequest,
    SummarizeRequest,
    SummaryResponse,
    TextRequest,
)
from learnhub.entities import BatchItem, SummaryKind
from learnhub.exceptions import InvalidInputError
from learnhub.services import SummarizationService


def _bad_request(e: InvalidInputError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


class SummaryHandler:
    """HTTP handlers for summarization.

    The service never fails because of the remote provider, so the only
    error mapped here is invalid input (400).
    """

    def __init__(self, summarization_service: SummarizationService) -> None:
        """Initialize the summary handler.

        Args:
            summarization_service: The summarization service (required).
        """
        self._summarizer = summarization_service

    async def summarize(self, request: SummarizeRequest) -> SummaryResponse:
        """Handle POST /ai/summarize requests."""
        try:
            summary = await self._summarizer.summarize(request.text, request.max_length)
        except InvalidInputError as e:
            raise _bad_request(e) from e
        return SummaryResponse(summary=summary, type=SummaryKind.STANDARD.value)

    async def bullet_points(self, request: TextRequest) -> SummaryResponse:
        """Handle POST /ai/bullet-points requests."""
        try:
            summary = await self._summarizer.bullet_points(request.text)
        except InvalidInputError as e:
            raise _bad_request(e) from e
        return SummaryResponse(summary=summary, type=SummaryKind.BULLET_POINTS.value)

    async def key_concepts(self, request: TextRequest) -> ConceptsResponse:
        """Handle POST /ai/concepts requests."""
        try:
            concepts = await self._summarizer.key_concepts(request.text)
        except InvalidInputError as e:
            raise _bad_request(e) from e
        return ConceptsResponse(concepts=concepts)

    async def study_questions(self, request: StudyQuestionsRequest) -> QuestionsResponse:
        """Handle POST /ai/questions requests."""
        try:
            questions = await self._summarizer.study_questions(request.text, request.count)
        except InvalidInputError as e:
            raise _bad_request(e) from e
        return QuestionsResponse(questions=questions)

    async def batch(self, request: BatchSummarizeRequest) -> BatchSummaryResponse:
        """Handle POST /ai/batch requests.

        Per-note failures are reported in the body, not as an HTTP error.
        """
        items = [BatchItem(id=note.id, content=note.content) for note in request.notes]
        try:
            result = await self._summarizer.batch_summarize(items, request.type, request.max_length)
        except InvalidInputError as e:
            raise _bad_request(e) from e
        return BatchSummaryResponse(**result.to_dict())

    async def status(self) -> ProviderStatusResponse:
        """Handle GET /ai/status requests."""
        provider = self._summarizer.test_connection()
        return ProviderStatusResponse(
            provider=provider.provider,
            configured=provider.available,
            model=provider.model,
            endpoint=provider.endpoint,
            api_key="configured" if provider.api_key_configured else "not configured",
        )

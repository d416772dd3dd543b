"""Summarization service.

Every public operation is a two-step pipeline: one remote attempt that
yields a ProviderOutcome, then either formatting of the remote text or the
matching offline heuristic. Apart from InvalidInputError for unusable input,
public operations always return a plain value.
"""

from collections.abc import Iterable

from learnhub.config import settings
from learnhub.entities import BatchItem, BatchResult, ProviderOutcome, ProviderStatus, SummaryKind
from learnhub.exceptions import InvalidInputError, ProviderCallFailedError, ProviderUnavailableError
from learnhub.log import get_logger
from learnhub.protocols import SummarizationProvider
from learnhub.services import heuristics

logger = get_logger(__name__)


class SummarizationService:
    """Condense text with a remote model, degrading to local heuristics.

    The provider state (configured or not) is read once at construction and
    only refreshed by `check_provider()`. An unconfigured service never
    touches the network.

    Example:
        ```python
        from learnhub.repositories import HuggingFaceSummarizationProvider
        from learnhub.services import SummarizationService

        service = SummarizationService.create(
            provider=HuggingFaceSummarizationProvider.create(),
        )
        summary = await service.summarize(note.content, max_length=150)
        ```
    """

    # Remote length budgets of the derived operations
    BULLET_POINTS_LENGTH = 300
    CONCEPTS_LENGTH = 100
    QUESTIONS_LENGTH = 200
    DEFAULT_QUESTION_COUNT = 5

    def __init__(
        self,
        provider: SummarizationProvider,
        default_max_length: int | None = None,
    ) -> None:
        """Initialize the summarization service.

        Args:
            provider: Remote summarization provider (required).
            default_max_length: Length budget when callers give none. Defaults to settings.
        """
        self._provider = provider
        self._default_max_length = default_max_length or settings.summary_max_length
        self._status = self._read_status()

    @classmethod
    def create(
        cls,
        provider: SummarizationProvider,
        default_max_length: int | None = None,
    ) -> "SummarizationService":
        """Factory method to create SummarizationService with settings defaults."""
        return cls(provider=provider, default_max_length=default_max_length)

    def _read_status(self) -> ProviderStatus:
        configured = self._provider.is_configured()
        return ProviderStatus(
            provider=self._provider.name,
            available=configured,
            model=self._provider.model_name,
            endpoint=self._provider.endpoint,
            api_key_configured=configured,
        )

    def test_connection(self) -> ProviderStatus:
        """Report the provider state captured at initialization (no network call)."""
        return self._status

    def check_provider(self) -> ProviderStatus:
        """Re-read the provider configuration and return the new status."""
        self._status = self._read_status()
        return self._status

    @property
    def is_configured(self) -> bool:
        return self._status.available

    @staticmethod
    def _require_text(text: str) -> str:
        if not text or not text.strip():
            raise InvalidInputError("No text provided for summarization")
        return text

    @staticmethod
    def _require_positive(name: str, value: int) -> int:
        if value < 1:
            raise InvalidInputError(f"{name} must be at least 1, got {value}")
        return value

    async def _attempt_remote(self, text: str, max_length: int) -> ProviderOutcome:
        """Single remote attempt, folded into a ProviderOutcome."""
        if not self._status.available:
            return ProviderOutcome.failure("provider not configured")

        try:
            summary = await self._provider.summarize(text, max_length)
        except ProviderUnavailableError as e:
            return ProviderOutcome.failure(str(e))
        except ProviderCallFailedError as e:
            logger.warning("Remote summarization failed, using fallback: %s", e)
            return ProviderOutcome.failure(str(e))

        return ProviderOutcome.success(summary)

    async def summarize(self, text: str, max_length: int | None = None) -> str:
        """Summarize `text` within `max_length`.

        Args:
            text: Non-empty text to condense
            max_length: Length budget (words for the fallback). Defaults to settings.

        Returns:
            The remote summary, or the extractive fallback

        Raises:
            InvalidInputError: If `text` is empty or `max_length` is below 1
        """
        self._require_text(text)
        if max_length is None:
            max_length = self._default_max_length
        self._require_positive("max_length", max_length)

        outcome = await self._attempt_remote(text, max_length)
        if outcome.ok:
            return outcome.text
        return heuristics.fallback_summary(text, max_length)

    async def bullet_points(self, text: str) -> str:
        """Summarize as one bulleted line per sentence."""
        self._require_text(text)

        outcome = await self._attempt_remote(text, self.BULLET_POINTS_LENGTH)
        sentences = heuristics.split_sentences(outcome.text) if outcome.ok else []
        if sentences:
            return heuristics.as_bullets(sentences)
        return heuristics.fallback_bullet_points(text)

    async def key_concepts(self, text: str) -> list[str]:
        """Extract key terms, from the remote comma-separated answer or word counts."""
        self._require_text(text)

        outcome = await self._attempt_remote(text, self.CONCEPTS_LENGTH)
        terms = [t.strip() for t in outcome.text.split(",") if t.strip()] if outcome.ok else []
        if terms:
            return terms
        return heuristics.fallback_key_concepts(text)

    async def study_questions(self, text: str, count: int = DEFAULT_QUESTION_COUNT) -> list[str]:
        """Produce up to `count` numbered study questions.

        The fallback is a fixed list of generic reflection questions.
        """
        self._require_text(text)
        self._require_positive("count", count)

        outcome = await self._attempt_remote(text, self.QUESTIONS_LENGTH)
        sentences = heuristics.split_sentences(outcome.text) if outcome.ok else []
        if sentences:
            return heuristics.as_questions(sentences, count)
        return heuristics.fallback_study_questions()

    async def render(self, text: str, kind: SummaryKind, max_length: int | None = None) -> str:
        """Produce the text form of any summary kind."""
        if kind == SummaryKind.BULLET_POINTS:
            return await self.bullet_points(text)
        if kind == SummaryKind.CONCEPTS:
            concepts = await self.key_concepts(text)
            return f"Key Concepts: {', '.join(concepts)}"
        if kind == SummaryKind.QUESTIONS:
            questions = await self.study_questions(text)
            return "Study Questions:\n" + "\n".join(questions)
        return await self.summarize(text, max_length)

    async def batch_summarize(
        self,
        items: Iterable[BatchItem],
        kind: SummaryKind | str = SummaryKind.STANDARD,
        max_length: int | None = None,
    ) -> BatchResult:
        """Summarize several notes sequentially.

        A failing item is recorded in `failed` and processing continues.

        Args:
            items: Notes to summarize
            kind: Summary kind applied to every item
            max_length: Length budget for standard summaries

        Returns:
            BatchResult grouping items by outcome
        """
        try:
            kind = SummaryKind(kind)
        except ValueError as e:
            raise InvalidInputError(f"Unknown summary kind {kind!r}") from e

        result = BatchResult()
        for item in items:
            try:
                summary = await self.render(item.content, kind, max_length)
            except Exception as e:  # one note never aborts the batch
                logger.warning("Batch item %s failed: %s", item.id, e)
                result.failed.append({"note_id": item.id, "error": str(e)})
                continue
            result.successful.append({"note_id": item.id, "summary": summary, "success": True})

        logger.info(
            "Batch summarization finished: %d processed, success rate %s",
            result.total_processed,
            result.success_rate,
        )
        return result

    @property
    def provider(self) -> SummarizationProvider:
        """Get the underlying provider (for testing)."""
        return self._provider

"""Shared pytest fixtures."""

import pytest

from learnhub.entities import CacheTier
from learnhub.repositories import HuggingFaceSummarizationProvider, InMemoryCacheStore
from learnhub.services import CacheService, SummarizationService

TEST_TTLS = {CacheTier.SHORT: 60, CacheTier.MEDIUM: 300, CacheTier.LONG: 3600}


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubProvider:
    """In-process SummarizationProvider returning canned answers."""

    name = "stub"
    model_name = "stub-model"
    endpoint = "http://stub.local"

    def __init__(
        self,
        responses: list[str] | None = None,
        error: Exception | None = None,
        configured: bool = True,
    ) -> None:
        self.responses = list(responses or [])
        self.error = error
        self.configured = configured
        self.calls: list[tuple[str, int]] = []

    def is_configured(self) -> bool:
        return self.configured

    async def summarize(self, text: str, max_length: int) -> str:
        self.calls.append((text, max_length))
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return "stub summary"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store(clock: FakeClock) -> InMemoryCacheStore:
    return InMemoryCacheStore(clock=clock)


@pytest.fixture
def cache_service(memory_store: InMemoryCacheStore) -> CacheService:
    return CacheService(store=memory_store, ttls=dict(TEST_TTLS))


@pytest.fixture
def offline_summarizer() -> SummarizationService:
    """Summarization service without an API key (always uses the fallback)."""
    provider = HuggingFaceSummarizationProvider(api_key="", model_name="facebook/bart-large-cnn")
    return SummarizationService(provider=provider, default_max_length=500)

"""Summarization domain entities."""

from dataclasses import dataclass, field
from enum import Enum


class SummaryKind(str, Enum):
    """Kind of condensation requested."""

    STANDARD = "standard"
    BULLET_POINTS = "bullet-points"
    CONCEPTS = "concepts"
    QUESTIONS = "questions"


@dataclass(frozen=True)
class ProviderStatus:
    """Snapshot of the summarization provider configuration.

    Attributes:
        provider: Provider identifier (e.g. "huggingface")
        available: Whether remote calls will be attempted
        model: Model identifier
        endpoint: Base URL of the inference API
        api_key_configured: Whether a credential is present
    """

    provider: str
    available: bool
    model: str
    endpoint: str
    api_key_configured: bool


@dataclass(frozen=True)
class ProviderOutcome:
    """Result of one remote attempt: either text or an error message."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, text: str) -> "ProviderOutcome":
        return cls(text=text)

    @classmethod
    def failure(cls, error: str) -> "ProviderOutcome":
        return cls(error=error)


@dataclass(frozen=True)
class BatchItem:
    """One note submitted for batch summarization."""

    id: str
    content: str


@dataclass
class BatchResult:
    """Outcome of a batch run, grouped by success."""

    successful: list[dict] = field(default_factory=list)
    failed: list[dict] = field(default_factory=list)

    @property
    def total_processed(self) -> int:
        return len(self.successful) + len(self.failed)

    @property
    def success_rate(self) -> str:
        """Success percentage formatted with one decimal place."""
        if self.total_processed == 0:
            return "0.0%"
        return f"{len(self.successful) / self.total_processed * 100:.1f}%"

    def to_dict(self) -> dict:
        return {
            "successful": self.successful,
            "failed": self.failed,
            "total_processed": self.total_processed,
            "success_rate": self.success_rate,
        }

"""Summarization provider protocol.

Defines the interface for a remote service that condenses text.

Implementations can include:
- Hugging Face inference API (default)
- Any self-hosted endpoint speaking the same contract
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SummarizationProvider(Protocol):
    """Protocol for remote summarization services."""

    @property
    def name(self) -> str:
        """Provider identifier, e.g. "huggingface"."""
        ...

    @property
    def model_name(self) -> str:
        """Model identifier used for remote calls."""
        ...

    @property
    def endpoint(self) -> str:
        """Base URL of the inference API."""
        ...

    def is_configured(self) -> bool:
        """Whether a credential is present and remote calls may be attempted."""
        ...

    async def summarize(self, text: str, max_length: int) -> str:
        """Summarize text remotely.

        Args:
            text: The text to condense
            max_length: Upper bound for the generated summary length

        Returns:
            The trimmed summary text

        Raises:
            ProviderUnavailableError: If the provider is not configured
            ProviderCallFailedError: On network, timeout or response format errors
        """
        ...

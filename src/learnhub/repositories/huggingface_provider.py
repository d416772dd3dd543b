"""Hugging Face inference API summarization provider.

Calls `POST {base_url}/models/{model}/summarization` with a bearer token.
The provider is configured only when an API key is present; without one it
refuses to perform any network I/O.

Requirements:
    - A Hugging Face access token in HUGGINGFACE_API_KEY
    - Optionally AI_API_URL / AI_MODEL to point at another endpoint or model
"""

import httpx

from learnhub.config import settings
from learnhub.exceptions import ProviderCallFailedError, ProviderUnavailableError
from learnhub.log import get_logger

logger = get_logger(__name__)


class HuggingFaceSummarizationProvider:
    """Hugging Face implementation of the SummarizationProvider protocol.

    This class satisfies the SummarizationProvider protocol through
    structural typing - no explicit inheritance needed.

    Example:
        ```python
        provider = HuggingFaceSummarizationProvider.create(api_key="hf_...")
        summary = await provider.summarize("Long lecture notes ...", max_length=150)
        ```
    """

    # Generation controls sent with every request; tuning values, not contract
    GENERATION_PARAMETERS = {
        "do_sample": False,
        "early_stopping": True,
        "num_beams": 3,
        "no_repeat_ngram_size": 2,
    }

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        min_length: int | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: Bearer token. Defaults to settings.huggingface_api_key;
                     pass "" to force an unconfigured provider.
            model_name: Model identifier. Defaults to settings.summarizer_model.
            base_url: Inference API base URL. Defaults to settings.summarizer_base_url.
            timeout: Request timeout in seconds. Defaults to settings.summarizer_timeout.
            min_length: Lower bound sent to the model. Defaults to settings.summary_min_length.
            client: Pre-built async HTTP client (mostly for tests).
        """
        self._api_key = api_key if api_key is not None else settings.huggingface_api_key
        self._model_name = model_name or settings.summarizer_model
        self._base_url = (base_url or settings.summarizer_base_url).rstrip("/")
        self._timeout = timeout or settings.summarizer_timeout
        self._min_length = min_length or settings.summary_min_length
        self._client = client

        if self.is_configured():
            logger.info("Hugging Face provider available (model: %s)", self._model_name)
        else:
            logger.info("Hugging Face provider not available (no API key)")

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
    ) -> "HuggingFaceSummarizationProvider":
        """Factory method to create the provider with defaults.

        Args:
            api_key: Bearer token. If None, uses settings.
            model_name: Model name. If None, uses settings.
            base_url: Inference API URL. If None, uses settings.

        Returns:
            Configured HuggingFaceSummarizationProvider
        """
        return cls(api_key=api_key, model_name=model_name, base_url=base_url)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def name(self) -> str:
        return "huggingface"

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def endpoint(self) -> str:
        return self._base_url

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def summarize(self, text: str, max_length: int) -> str:
        """Generate a summary through the inference API.

        Args:
            text: The text to condense
            max_length: Maximum summary length passed to the model

        Returns:
            The trimmed `summary_text` of the first result

        Raises:
            ProviderUnavailableError: If no API key is configured
            ProviderCallFailedError: On HTTP errors, timeouts, an unusable base URL
                or malformed responses
        """
        if not self.is_configured():
            raise ProviderUnavailableError("Hugging Face service is not available")

        url = f"{self._base_url}/models/{self._model_name}/summarization"
        payload = {
            "inputs": text,
            "parameters": {
                "max_length": max_length,
                "min_length": min(self._min_length, max_length),
                **self.GENERATION_PARAMETERS,
            },
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            response = await self.client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProviderCallFailedError(f"Hugging Face API error: {e}") from e
        except ValueError as e:
            raise ProviderCallFailedError(f"Hugging Face returned invalid JSON: {e}") from e

        return self._extract_summary(data)

    @staticmethod
    def _extract_summary(data: object) -> str:
        """Pull `summary_text` out of `[{"summary_text": ...}, ...]`."""
        if isinstance(data, list) and data and isinstance(data[0], dict):
            summary = data[0].get("summary_text")
            if isinstance(summary, str) and summary.strip():
                return summary.strip()
        raise ProviderCallFailedError(f"Invalid response from Hugging Face: {data!r:.200}")

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

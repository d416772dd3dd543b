"""Error taxonomy.

Only InvalidInputError is meant to cross the service boundary. The other
errors are raised by repositories and absorbed by the services: provider
errors trigger the local fallback, cache backend errors make the cache fail
open.
"""


class LearnHubError(Exception):
    """Base class for all learnhub errors."""


class InvalidInputError(LearnHubError, ValueError):
    """Caller passed unusable input (e.g. empty text to summarize)."""


class ProviderUnavailableError(LearnHubError):
    """The remote summarization provider is not configured."""


class ProviderCallFailedError(LearnHubError):
    """The remote summarization call failed or returned a malformed response."""


class CacheBackendError(LearnHubError):
    """The cache storage backend failed."""

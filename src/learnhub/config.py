import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("memory", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Cache backend
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory")
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "learnhub")

    # Redis (only used when CACHE_BACKEND=redis)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Tier TTLs in seconds
    cache_short_ttl: int = int(os.getenv("CACHE_SHORT_TTL", "60"))
    cache_medium_ttl: int = int(os.getenv("CACHE_MEDIUM_TTL", "300"))
    cache_long_ttl: int = int(os.getenv("CACHE_LONG_TTL", "3600"))

    # Summarization provider
    summarizer_base_url: str = os.getenv("AI_API_URL", "https://api-inference.huggingface.co")
    summarizer_model: str = os.getenv("AI_MODEL", "facebook/bart-large-cnn")
    huggingface_api_key: str | None = os.getenv("HUGGINGFACE_API_KEY")
    summarizer_timeout: float = float(os.getenv("AI_TIMEOUT", "30"))
    summary_min_length: int = int(os.getenv("SUMMARY_MIN_LENGTH", "50"))
    summary_max_length: int = int(os.getenv("SUMMARY_MAX_LENGTH", "500"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    @property
    def tier_ttls(self) -> dict[str, int]:
        """TTL per tier name, in seconds."""
        return {
            "short": self.cache_short_ttl,
            "medium": self.cache_medium_ttl,
            "long": self.cache_long_ttl,
        }

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, got {self.cache_backend!r}"
            )

        for name, ttl in self.tier_ttls.items():
            if ttl <= 0:
                raise ValueError(f"CACHE_{name.upper()}_TTL must be positive, got {ttl}")

        if self.summarizer_timeout <= 0:
            raise ValueError("AI_TIMEOUT must be positive")

        if not 1 <= self.summary_min_length <= self.summary_max_length:
            raise ValueError("SUMMARY_MIN_LENGTH must be between 1 and SUMMARY_MAX_LENGTH")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )

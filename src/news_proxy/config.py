import os
import tempfile
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("file", "memory", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream (GNews)
    gnews_base_url: str = os.getenv("GNEWS_BASE_URL", "https://gnews.io/api/v4")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # Query defaults
    default_lang: str = os.getenv("DEFAULT_LANG", "es")
    default_country: str = os.getenv("DEFAULT_COUNTRY", "ar")
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "12"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "50"))

    # Cache
    cache_ttl: int = int(os.getenv("CACHE_TTL", "300"))  # 5 minutes
    cache_max_age: int = int(os.getenv("CACHE_MAX_AGE", "60"))  # Cache-Control max-age
    cache_backend: str = os.getenv("CACHE_BACKEND", "file")
    cache_dir: str = os.getenv("CACHE_DIR", os.path.join(tempfile.gettempdir(), "news-cache"))
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "news")

    # Redis (only used with CACHE_BACKEND=redis)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "info")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError("CACHE_TTL must be a positive number of seconds")

        if self.cache_max_age < 0:
            raise ValueError("CACHE_MAX_AGE must not be negative")

        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, got {self.cache_backend!r}"
            )

        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError("DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_api_key() -> str | None:
    """Read the GNews credential from the environment.

    Called at request-handling entry so a missing key is reported per request
    instead of failing the whole process at import time.
    """
    api_key = os.getenv("GNEWS_API_KEY", "").strip()
    return api_key or None


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )

"""
Crawler Configuration

Crawl parameters read from the environment at import time.
"""

import os
from dataclasses import dataclass
from enum import Enum


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable (defaults to production)."""
    env_value = os.getenv("ENVIRONMENT", Environment.PRODUCTION.value)
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class CrawlerSettings:
    """Crawler configuration"""

    # Application
    APP_NAME: str = "linkcrawl"
    APP_VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Environment = _get_environment()

    # Crawler Behavior
    CRAWL_SCHEME: str = os.getenv("CRAWL_SCHEME", "http")
    CRAWL_MAX_DEPTH: int = int(os.getenv("CRAWL_MAX_DEPTH", "5"))
    CRAWL_TIMEOUT_SEC: float = float(os.getenv("CRAWL_TIMEOUT_SEC", "10"))
    # 0 means one in-flight fetch per frontier address
    CRAWL_CONCURRENCY: int = int(os.getenv("CRAWL_CONCURRENCY", "16"))
    CRAWL_USER_AGENT: str = os.getenv(
        "CRAWL_USER_AGENT", "linkcrawl/0.1 (+breadth-first link crawler)"
    )
    CRAWL_MAX_RESPONSE_BYTES: int = int(
        os.getenv("CRAWL_MAX_RESPONSE_BYTES", str(10 * 1024 * 1024))
    )
    CRAWL_FOLLOW_REDIRECTS: bool = _get_bool("CRAWL_FOLLOW_REDIRECTS", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

settings = CrawlerSettings()


def _validate(settings: CrawlerSettings) -> None:
    """Reject settings the crawler cannot run with."""
    if settings.CRAWL_SCHEME not in ("http", "https"):
        raise RuntimeError(f"Unsupported CRAWL_SCHEME: '{settings.CRAWL_SCHEME}'")
    if settings.CRAWL_MAX_DEPTH < 1:
        raise RuntimeError("CRAWL_MAX_DEPTH must be >= 1")
    if settings.CRAWL_TIMEOUT_SEC <= 0:
        raise RuntimeError("CRAWL_TIMEOUT_SEC must be > 0")
    if settings.CRAWL_CONCURRENCY < 0:
        raise RuntimeError("CRAWL_CONCURRENCY must be >= 0")
    if settings.CRAWL_MAX_RESPONSE_BYTES <= 0:
        raise RuntimeError("CRAWL_MAX_RESPONSE_BYTES must be > 0")
    if settings.LOG_LEVEL not in LOG_LEVELS:
        raise RuntimeError(f"Unsupported LOG_LEVEL: '{settings.LOG_LEVEL}'")


_validate(settings)


@dataclass
class CrawlConfig:
    """Per-crawl parameters; defaults come from the environment settings"""

    scheme: str = settings.CRAWL_SCHEME
    max_depth: int = settings.CRAWL_MAX_DEPTH
    timeout_sec: float = settings.CRAWL_TIMEOUT_SEC
    concurrency: int = settings.CRAWL_CONCURRENCY
    user_agent: str = settings.CRAWL_USER_AGENT
    max_response_bytes: int = settings.CRAWL_MAX_RESPONSE_BYTES
    follow_redirects: bool = settings.CRAWL_FOLLOW_REDIRECTS

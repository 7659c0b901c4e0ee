"""Environment-driven configuration for the Unsplash scraper."""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

BASE_URL = "https://unsplash.com"

DEFAULT_REQUEST_DELAY_MS = 1000
DEFAULT_CACHE_TTL = 300  # 5 minutes
DEFAULT_MAX_RETRIES = 3
DEFAULT_TIMEOUT = 30

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:121.0) Gecko/20100101 Firefox/121.0",
]


def get_random_user_agent() -> str:
    """Pick one of the bundled desktop browser user agents."""
    return random.choice(USER_AGENTS)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}={raw!r}, using default {default}")
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in ("true", "1", "yes")


@dataclass
class ScraperConfig:
    """Settings consumed by the scraper facade and its transport."""

    user_agent: str = field(default_factory=get_random_user_agent)
    request_delay_ms: int = DEFAULT_REQUEST_DELAY_MS
    cache_ttl: int = DEFAULT_CACHE_TTL
    max_retries: int = DEFAULT_MAX_RETRIES
    base_url: str = BASE_URL
    timeout: int = DEFAULT_TIMEOUT


def load_config() -> ScraperConfig:
    """Build a ScraperConfig from environment variables.

    Reads USER_AGENT, REQUEST_DELAY (milliseconds), CACHE_TTL (seconds)
    and MAX_RETRIES. Missing or malformed values fall back to defaults.

    Returns:
        The resolved configuration
    """
    return ScraperConfig(
        user_agent=os.getenv("USER_AGENT") or get_random_user_agent(),
        request_delay_ms=_env_int("REQUEST_DELAY", DEFAULT_REQUEST_DELAY_MS),
        cache_ttl=_env_int("CACHE_TTL", DEFAULT_CACHE_TTL),
        max_retries=_env_int("MAX_RETRIES", DEFAULT_MAX_RETRIES),
    )


def validate_config(config: ScraperConfig) -> list[str]:
    """Log warnings for settings likely to cause trouble.

    Args:
        config: Configuration to check

    Returns:
        The warning messages that were logged
    """
    warnings = []

    if config.request_delay_ms < 500:
        warnings.append("Request delay is very low, consider increasing to avoid rate limiting")

    if config.max_retries > 10:
        warnings.append("Max retries is very high, this might cause long delays")

    for message in warnings:
        logger.warning(message)

    return warnings


def cache_tools_enabled() -> bool:
    """Whether the optional cache management tools should be registered."""
    return _env_bool("ENABLE_CACHE_TOOLS")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()

"""Logging setup and activity helpers.

All output goes to stderr: when the server runs over the stdio transport,
stdout carries the MCP protocol stream.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

logger = logging.getLogger("unsplash_mcp")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
RESULT_PREVIEW_CHARS = 200


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging to stderr.

    Args:
        level: Logging level name or number
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def log_api_call(method: str, url: str, status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request."""
    duration = f"{duration_ms:.0f}ms" if duration_ms is not None else "-"
    logger.info(f"API call: {method} {url} status={status} duration={duration}")


def log_scrape_activity(action: str, target: str, result: Any = None) -> None:
    """Log a scraping step, truncating any attached result."""
    message = f"Scraping activity: {action} {target}"
    if result is not None:
        text = json.dumps(result, default=str) if isinstance(result, (dict, list)) else str(result)
        message += f" {text[:RESULT_PREVIEW_CHARS]}"
    logger.info(message)


def log_error(error: BaseException, context: dict[str, Any] | None = None) -> None:
    """Log an error with its context and traceback."""
    logger.error(
        f"Error occurred: {error} context={context or {}}",
        exc_info=(type(error), error, error.__traceback__),
    )


def log_cache_operation(operation: str, key: str) -> None:
    logger.debug(f"Cache {operation}: {key}")

"""Structured logging for page streams.

This module provides telemetry hooks for the page walk, emitting structured
logs that downstream handlers can turn into metrics.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    path: str,
    offset: str | None,
    size: int,
    total: int,
    latency_ms: float | None = None,
) -> None:
    """Log a fetched page.

    Args:
        path: Route of the page
        offset: Cursor offset the page was requested with
        size: Number of entities in the page
        total: Collection size reported by the page
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "path": path,
            "offset": offset,
            "size": size,
            "total": total,
            "latency_ms": latency_ms,
        },
    )


def log_stream_complete(
    *,
    endpoint_id: str,
    reason: str,
    items_emitted: int,
    pages_fetched: int,
) -> None:
    """Log the end of a stream, whatever the cause."""
    logger.info(
        "stream_complete",
        extra={
            "endpoint_id": endpoint_id,
            "reason": reason,
            "items_emitted": items_emitted,
            "pages_fetched": pages_fetched,
        },
    )


def log_stream_error(
    *,
    endpoint_id: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log the error that terminated a stream."""
    logger.error(
        "stream_error",
        extra={
            "endpoint_id": endpoint_id,
            "error_type": error_type,
            "error_message": error_message,
        },
    )

"""
Structured logging utilities.

Provides logging setup for the stdlib and structlog loggers, and a context
manager for operation logging with timing and error tracking.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from src.core.config.logging_config import LoggingConfig

logger = structlog.get_logger()


def setup_logging(logging_config: LoggingConfig) -> None:
    """
    Configure stdlib logging and structlog from the logging config.

    Stdlib loggers (webhook plumbing, uvicorn) go through ``logging.basicConfig``;
    structlog loggers render key/value events, or JSON when ``json_logs`` is set.
    """
    level = getattr(logging, logging_config.level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=logging_config.format,
        stream=sys.stdout,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer() if logging_config.json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


@asynccontextmanager
async def log_operation(
    operation: str,
    subject_ids: dict[str, str] | None = None,
    **context: Any,
) -> AsyncIterator[None]:
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.
    Errors are re-raised after logging.

    Args:
        operation: Name of the operation being performed
        subject_ids: Dictionary of subject identifiers (e.g., {"repo": "owner/repo", "pr": "123"})
        **context: Additional context to include in logs

    Example:
        async with log_operation("localization_review", subject_ids={"pr": "42"}):
            await processor.run(...)
    """
    start_time = time.time()
    log = logger.bind(operation=operation, **(subject_ids or {}), **context)

    log.info("operation_started")

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        log.error("operation_failed", error=str(e), latency_ms=latency_ms, exc_info=True)
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        log.info("operation_completed", latency_ms=latency_ms)

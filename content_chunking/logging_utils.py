"""Structured logging utilities.

Every record is a single JSON object with timestamp, level, pipeline step
(segment, fallback, chunk, fetch, store, queue, ingest) and message, plus
any context and extra fields.
"""

import json
import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any


class StructuredLogger:
    """Logger that outputs structured JSON for chunking pipelines."""

    def __init__(self, logger: logging.Logger | None = None):
        """Initialize structured logger.

        Args:
            logger: Python logger to use (defaults to the package logger)
        """
        self.logger = logger or logging.getLogger("content_chunking")
        # Context is per thread and per asyncio task
        self._context: ContextVar[dict[str, Any]] = ContextVar(f"structured_log_context_{id(self)}")

    def set_context(self, **kwargs: Any) -> None:
        """Set persistent context fields (e.g. document_id) for later logs."""
        self._context.set({**self._context.get({}), **kwargs})

    def clear_context(self) -> None:
        """Clear all context fields."""
        self._context.set({})

    @contextmanager
    def context(self, **kwargs: Any) -> Iterator[None]:
        """Apply context fields for the duration of a block, then restore."""
        token = self._context.set({**self._context.get({}), **kwargs})
        try:
            yield
        finally:
            self._context.reset(token)

    def format_entry(
        self,
        level: str,
        step: str,
        message: str,
        duration_ms: int | None = None,
        **kwargs: Any,
    ) -> str:
        """Format a structured log entry as a JSON string."""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "step": step,
            "message": message,
            **self._context.get({}),
            **kwargs,
        }

        if duration_ms is not None:
            entry["duration_ms"] = duration_ms

        # Enums and other non-JSON values fall back to str()
        return json.dumps(entry, default=str)

    def _log(self, level: int, step: str, message: str, duration_ms: int | None, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(
            level,
            self.format_entry(logging.getLevelName(level), step, message, duration_ms, **kwargs),
        )

    def debug(self, step: str, message: str, duration_ms: int | None = None, **kwargs: Any) -> None:
        self._log(logging.DEBUG, step, message, duration_ms, **kwargs)

    def info(self, step: str, message: str, duration_ms: int | None = None, **kwargs: Any) -> None:
        self._log(logging.INFO, step, message, duration_ms, **kwargs)

    def warning(self, step: str, message: str, duration_ms: int | None = None, **kwargs: Any) -> None:
        self._log(logging.WARNING, step, message, duration_ms, **kwargs)

    def error(self, step: str, message: str, duration_ms: int | None = None, **kwargs: Any) -> None:
        self._log(logging.ERROR, step, message, duration_ms, **kwargs)

    @contextmanager
    def timed_operation(self, step: str, message: str, **kwargs: Any) -> Iterator[dict[str, Any]]:
        """Context manager for timing pipeline steps.

        Logs the message with duration on success. On failure logs an error
        record carrying the exception text and re-raises.

        Args:
            step: Pipeline step
            message: Message to log on completion
            **kwargs: Additional fields

        Yields:
            dict that can be updated with additional fields during operation
        """
        start_time = time.perf_counter()
        extra_fields: dict[str, Any] = {}

        try:
            yield extra_fields
        except Exception as e:
            duration_ms = int((time.perf_counter() - start_time) * 1000)
            # Fields set during the operation override the initial ones
            fields = {**kwargs, **extra_fields, "error": str(e)}
            self.error(step, f"{message} - FAILED: {e!s}", duration_ms=duration_ms, **fields)
            raise

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        self.info(step, message, duration_ms=duration_ms, **{**kwargs, **extra_fields})


# Global logger instance
structured_logger = StructuredLogger()

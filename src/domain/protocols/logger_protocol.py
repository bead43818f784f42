"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs: a short event message plus
key-value context. Handlers depend on this protocol, the container wires
in ConsoleAdapter.

Log Levels:
    - DEBUG: Diagnostic detail (SQL-heavy strategies, row counts)
    - INFO: Normal operations (orders_listed, member_created)
    - WARNING: Rejected requests (invalid paging, duplicate member)
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("orders_listed", strategy="fetch_join", count=2)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("member_create_rejected", reason="duplicate")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short description.
            error: Optional exception, rendered as error_type/error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every call.

        The original logger is left unchanged.
        """
        ...

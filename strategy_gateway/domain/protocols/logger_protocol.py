"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while remaining
backend-agnostic. Messages are short snake_case event names; everything else
goes in key-value context.

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("strategy_created", strategy_name="default", created_by="alice")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.error("strategy_create_failed", error=exc, strategy_name=name)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures needing immediate attention.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

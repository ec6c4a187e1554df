"""LoggerProtocol definition for structured logging.

Standardizes structured logging across handlers and routers while staying
backend-agnostic (structlog console adapter today).

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events (assignor created, payable removed)
    - WARNING: Business-rule rejections (duplicate document, unknown id)
    - ERROR: Operation failed, system continues (dangling assignor reference)

Security:
    - NEVER log passwords or access tokens

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("Assignor created", assignor_id=str(assignor.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("Payable not found", payable_id=str(payable_id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

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
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...

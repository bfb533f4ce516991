"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations emit key-value
context and must never receive secrets: passwords, raw refresh tokens and
token hashes stay out of every log call. Token IDs and user IDs are fine.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events (token rotated, user registered)
    - WARNING: Suspicious but contained (expired token use, device mismatch,
      token reuse)
    - ERROR: Operation failed, system continues (cache invalidation failed)
    - CRITICAL: Security incident (refresh token chain compromised)

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("refresh_token_rotated", user_id=str(user_id))
    request_logger = logger.bind(trace_id=trace_id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger port: an event name plus key-value context.

    Messages are snake_case event names (``refresh_token_reuse_detected``);
    variable data goes into the context, never into the message.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure the process survives.

        Args:
            message: Event name.
            error: Exception whose type and message are added to the
                context as ``error_type`` and ``error_message``.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a security incident (a compromised refresh token chain).

        Takes the same arguments as error().
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every call.

        The receiver is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as bind()."""
        ...

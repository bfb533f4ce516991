"""Infrastructure event handlers."""

from src.infrastructure.events.handlers.security_logging_handler import (
    SecurityLoggingHandler,
)

__all__ = ["SecurityLoggingHandler"]

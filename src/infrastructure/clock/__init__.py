"""Clock adapters."""

from src.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]

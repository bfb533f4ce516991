"""Clock protocol for domain layer.

Every time-dependent decision (token expiry, rotation timestamps, sweep
cutoffs) reads the current time through this port so tests can pin it.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current UTC time.

    Implementations:
        - SystemClock: src/infrastructure/clock/system_clock.py
    """

    def utc_now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...

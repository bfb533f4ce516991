"""System clock adapter (implements ClockProtocol)."""

from datetime import UTC, datetime


class SystemClock:
    """Wall-clock time in UTC."""

    def utc_now(self) -> datetime:
        return datetime.now(UTC)

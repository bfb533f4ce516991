"""Background job factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_clock, get_logger, get_uow_factory

if TYPE_CHECKING:
    from src.infrastructure.jobs.expired_token_sweeper import (
        ExpiredRefreshTokenSweeper,
    )


@lru_cache()
def get_expired_token_sweeper() -> "ExpiredRefreshTokenSweeper | None":
    """Get the expired refresh token sweeper (app-scoped).

    Returns:
        Sweeper instance, or None when
        EXPIRED_TOKEN_SWEEP_INTERVAL_SECONDS is 0 (sweeping disabled).
    """
    from src.infrastructure.jobs.expired_token_sweeper import (
        ExpiredRefreshTokenSweeper,
    )

    interval = get_settings().expired_token_sweep_interval_seconds
    if interval <= 0:
        return None

    return ExpiredRefreshTokenSweeper(
        uow_factory=get_uow_factory(),
        clock=get_clock(),
        logger=get_logger(),
        interval_seconds=interval,
    )

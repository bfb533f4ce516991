"""Background jobs run inside the API process."""

from src.infrastructure.jobs.expired_token_sweeper import ExpiredRefreshTokenSweeper

__all__ = ["ExpiredRefreshTokenSweeper"]

"""Background sweep of expired refresh tokens.

Expired tokens are useless for authentication but are kept until they expire
so that a replayed rotated token is still recognized as reuse. Once past
expiry they are deleted in bulk on a fixed interval.

The loop is started and stopped by the application lifespan. Any failed
sweep is logged and the loop continues with the next interval; only
cancellation ends it.
"""

import asyncio

from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory


class ExpiredRefreshTokenSweeper:
    """Periodically deletes refresh tokens whose expiry has passed.

    Attributes:
        _interval_seconds: Pause between sweeps.
        _task: Running loop task, None when stopped.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        interval_seconds: int = 3600,
    ) -> None:
        if interval_seconds <= 0:
            msg = "Sweep interval must be positive"
            raise ValueError(msg)
        self._uow_factory = uow_factory
        self._clock = clock
        self._logger = logger
        self._interval_seconds = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> int:
        """Delete every expired token now.

        Returns:
            Number of tokens deleted.
        """
        now = self._clock.utc_now()
        async with self._uow_factory() as uow:
            deleted = await uow.refresh_tokens.delete_expired(now)
            await uow.commit()
        self._logger.info("expired_refresh_tokens_swept", deleted=deleted)
        return deleted

    async def _loop(self) -> None:
        while True:
            try:
                await self.run_once()
            except Exception as e:
                # CancelledError is a BaseException and still stops the loop
                self._logger.error("expired_refresh_token_sweep_failed", error=e)
            await asyncio.sleep(self._interval_seconds)

    def start(self) -> None:
        """Start the loop on the running event loop (no-op if already running)."""
        if self.is_running:
            return
        self._task = asyncio.create_task(self._loop(), name="expired-refresh-token-sweeper")

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

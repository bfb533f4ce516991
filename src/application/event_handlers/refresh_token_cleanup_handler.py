"""Expired refresh token cleanup on login.

Subscribes to RefreshTokenCreated. Each time a user gets a new token the
tokens of that user that are already past expiry are deleted, which keeps the
table from growing per login. Runs after the login transaction committed, in
its own unit of work.

Failures are logged and swallowed: cleanup is housekeeping and must never
turn a successful login into an error. The background sweeper catches
whatever is missed here.
"""

from sqlalchemy.exc import SQLAlchemyError

from src.domain.events import RefreshTokenCreated
from src.domain.protocols import ClockProtocol, LoggerProtocol, UnitOfWorkFactory


class RefreshTokenCleanupHandler:
    """Deletes a user's expired refresh tokens after a new one was issued.

    App-scoped singleton, subscribed at container startup.

    Example:
        >>> handler = RefreshTokenCleanupHandler(
        ...     uow_factory=get_uow_factory(),
        ...     clock=get_clock(),
        ...     logger=get_logger(),
        ... )
        >>> event_bus.subscribe(RefreshTokenCreated, handler.handle_refresh_token_created)
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock
        self._logger = logger

    async def handle_refresh_token_created(self, event: RefreshTokenCreated) -> None:
        """Delete the user's tokens whose expiry has passed.

        Args:
            event: RefreshTokenCreated with user_id.
        """
        try:
            async with self._uow_factory() as uow:
                deleted = await uow.refresh_tokens.delete_expired_by_user_id(
                    event.user_id, self._clock.utc_now()
                )
                await uow.commit()
        except (SQLAlchemyError, OSError) as e:
            self._logger.error(
                "expired_refresh_token_cleanup_failed",
                user_id=str(event.user_id),
                error=e,
            )
            return

        if deleted:
            self._logger.info(
                "expired_refresh_tokens_deleted",
                user_id=str(event.user_id),
                deleted_count=deleted,
            )

"""SQLAlchemy implementation of the unit of work.

All repositories share one AsyncSession, so everything staged during a
command commits or rolls back together. Domain events raised by the
aggregates seen by the repositories are published through the event bus
strictly after ``session.commit()`` returns. A rollback, an exception or a
cancellation discards them.

Usage:
    async with SqlAlchemyUnitOfWork(database.session(), event_bus) as uow:
        user = await uow.users.get_by_id(user_id)
        user.set_roles(roles, actor)
        await uow.users.update(user)
        await uow.commit()
"""

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.aggregate_root import AggregateRoot
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    RoleRepository,
    UserRepository,
)


class SqlAlchemyUnitOfWork:
    """Transaction boundary with post-commit domain event dispatch.

    Attributes:
        users: User repository.
        roles: Role repository (read-only reference data).
        refresh_tokens: Refresh token repository.
    """

    def __init__(self, session: AsyncSession, event_bus: EventBusProtocol) -> None:
        self._session = session
        self._event_bus = event_bus
        self._committed = False

        self.users = UserRepository(session)
        self.roles = RoleRepository(session)
        self.refresh_tokens = RefreshTokenRepository(session)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Roll back anything not committed, then close the session.

        Unlike auto-commit units of work, leaving the block without an
        explicit commit() discards the work.
        """
        try:
            if not self._committed:
                await self.rollback()
        finally:
            await self._session.close()

    def _tracked_aggregates(self) -> list[AggregateRoot]:
        return [*self.users.seen.values(), *self.refresh_tokens.seen.values()]

    def _collect_events(self) -> list[DomainEvent]:
        events: list[DomainEvent] = []
        for aggregate in self._tracked_aggregates():
            events.extend(aggregate.pull_domain_events())
        return events

    async def commit(self) -> None:
        """Commit, then publish collected events in the order they were raised
        per aggregate."""
        await self._session.commit()
        self._committed = True
        for event in self._collect_events():
            await self._event_bus.publish(event)

    async def rollback(self) -> None:
        await self._session.rollback()
        for aggregate in self._tracked_aggregates():
            aggregate.pull_domain_events()

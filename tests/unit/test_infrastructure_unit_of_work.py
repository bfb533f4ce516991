"""Unit tests for SqlAlchemyUnitOfWork.

Tests cover:
- Events published only after session commit returns
- Failed commit publishes nothing
- Leaving the block without commit rolls back and drops events
- Session always closed
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.entities.refresh_token import RefreshToken
from src.domain.events import RefreshTokenCreated
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from tests.utils.fakes import RecordingEventBus


def new_token() -> RefreshToken:
    return RefreshToken.issue(
        token_hash="hash",
        user_id=uuid4(),
        device_id="d1",
        expires_at=datetime.now(UTC) + timedelta(days=7),
    )


@pytest.mark.unit
class TestSqlAlchemyUnitOfWork:
    """Test transaction boundary and event dispatch."""

    @pytest.mark.asyncio
    async def test_commit_publishes_after_session_commit(self):
        # Arrange
        session = AsyncMock()
        bus = RecordingEventBus()
        order: list[str] = []
        session.commit.side_effect = lambda: order.append("commit")
        bus.subscribe(
            RefreshTokenCreated,
            AsyncMock(side_effect=lambda e: order.append("publish")),
        )
        token = new_token()

        # Act
        async with SqlAlchemyUnitOfWork(session=session, event_bus=bus) as uow:
            uow.refresh_tokens.seen[token.id] = token
            await uow.commit()

        # Assert
        assert order == ["commit", "publish"]
        assert bus.types() == [RefreshTokenCreated]
        assert token.domain_events == ()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_publishes_nothing(self):
        session = AsyncMock()
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("down"))
        bus = RecordingEventBus()
        token = new_token()

        with pytest.raises(OperationalError):
            async with SqlAlchemyUnitOfWork(session=session, event_bus=bus) as uow:
                uow.refresh_tokens.seen[token.id] = token
                await uow.commit()

        assert bus.events == []
        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_exit_without_commit_rolls_back_and_drops_events(self):
        session = AsyncMock()
        bus = RecordingEventBus()
        token = new_token()

        async with SqlAlchemyUnitOfWork(session=session, event_bus=bus) as uow:
            uow.refresh_tokens.seen[token.id] = token

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        assert token.domain_events == ()
        assert bus.events == []

    @pytest.mark.asyncio
    async def test_exception_inside_block_rolls_back(self):
        session = AsyncMock()
        bus = RecordingEventBus()

        with pytest.raises(RuntimeError):
            async with SqlAlchemyUnitOfWork(session=session, event_bus=bus):
                raise RuntimeError("boom")

        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

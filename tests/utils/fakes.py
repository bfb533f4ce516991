"""In-memory test doubles for the persistence and event ports.

The unit of work works on a copy of the store and swaps it in on commit, so
a handler that returns without committing leaves the store untouched, just
like a rolled-back database transaction. Repositories hand out copies of
the stored aggregates; only ``add()``/``update()`` write them back.
"""

import copy
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import TracebackType
from typing import Any, Self, TypeVar
from uuid import UUID

from src.domain.entities.aggregate_root import AggregateRoot
from src.domain.entities.refresh_token import RefreshToken
from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.domain.events.base_event import DomainEvent

_AggregateT = TypeVar("_AggregateT", bound=AggregateRoot)
_EventT = TypeVar("_EventT", bound=DomainEvent)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def utc_now(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class FakeRefreshTokenGenerator:
    """Issues raw-1, raw-2, ... hashed as ``hash:<raw>``."""

    def __init__(self, ttl: timedelta = timedelta(days=7)) -> None:
        self.ttl = ttl
        self._counter = 0

    def generate(self) -> tuple[str, str]:
        self._counter += 1
        raw = f"raw-{self._counter}"
        return raw, self.compute_hash(raw)

    def compute_hash(self, raw_token: str) -> str:
        return f"hash:{raw_token}"

    def expires_at(self, now: datetime) -> datetime:
        return now + self.ttl


@dataclass
class InMemoryStore:
    """Committed state shared by every unit of work of a test."""

    users: dict[UUID, User] = field(default_factory=dict)
    roles: dict[int, Role] = field(default_factory=dict)
    tokens: dict[UUID, RefreshToken] = field(default_factory=dict)
    commit_count: int = 0

    def tokens_of(self, user_id: UUID) -> list[RefreshToken]:
        return [t for t in self.tokens.values() if t.user_id == user_id]

    def token_by_hash(self, token_hash: str) -> RefreshToken | None:
        return next(
            (t for t in self.tokens.values() if t.token_hash == token_hash), None
        )


def _detached(aggregate: _AggregateT) -> _AggregateT:
    clone = copy.deepcopy(aggregate)
    clone.pull_domain_events()
    return clone


class InMemoryUserRepository:
    def __init__(self, state: InMemoryStore) -> None:
        self._state = state
        self.seen: dict[UUID, User] = {}

    def _track(self, user: User | None) -> User | None:
        if user is None:
            return None
        loaded = _detached(user)
        self.seen[loaded.id] = loaded
        return loaded

    async def get_by_id(self, user_id: UUID) -> User | None:
        user = self._state.users.get(user_id)
        if user is None or user.is_deleted:
            return None
        return self._track(user)

    async def get_by_email(self, email: str) -> User | None:
        for user in self._state.users.values():
            if user.email.lower() == email.lower() and not user.is_deleted:
                return self._track(user)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return any(u.email.lower() == email.lower() for u in self._state.users.values())

    async def add(self, user: User) -> None:
        self.seen[user.id] = user
        self._state.users[user.id] = _detached(user)

    async def update(self, user: User) -> None:
        if user.id not in self._state.users:
            raise LookupError(f"User {user.id} does not exist")
        self.seen[user.id] = user
        self._state.users[user.id] = _detached(user)


class InMemoryRoleRepository:
    def __init__(self, state: InMemoryStore) -> None:
        self._state = state

    async def get_by_id(self, role_id: int) -> Role | None:
        return self._state.roles.get(role_id)

    async def get_by_ids(self, role_ids: set[int]) -> list[Role]:
        return [
            self._state.roles[role_id]
            for role_id in sorted(role_ids)
            if role_id in self._state.roles
        ]

    async def list_all(self) -> list[Role]:
        return [self._state.roles[role_id] for role_id in sorted(self._state.roles)]

    async def get_permissions_for_user(self, user_id: UUID) -> frozenset[str]:
        user = self._state.users.get(user_id)
        if user is None:
            return frozenset()
        codes: set[str] = set()
        for role_id in user.role_ids:
            role = self._state.roles.get(role_id)
            if role is not None:
                codes.update(role.permissions)
        return frozenset(codes)


class InMemoryRefreshTokenRepository:
    def __init__(self, state: InMemoryStore) -> None:
        self._state = state
        self.seen: dict[UUID, RefreshToken] = {}
        self.locked_hashes: list[str] = []

    def _track(self, token: RefreshToken) -> RefreshToken:
        loaded = _detached(token)
        self.seen[loaded.id] = loaded
        return loaded

    async def get_by_token_hash(
        self, token_hash: str, *, for_update: bool = False
    ) -> RefreshToken | None:
        if for_update:
            self.locked_hashes.append(token_hash)
        token = self._state.token_by_hash(token_hash)
        return self._track(token) if token is not None else None

    async def get_by_id(self, token_id: UUID) -> RefreshToken | None:
        token = self._state.tokens.get(token_id)
        return self._track(token) if token is not None else None

    async def get_active_by_user_id(self, user_id: UUID) -> list[RefreshToken]:
        return [self._track(t) for t in self._state.tokens_of(user_id) if t.is_active]

    async def add(self, token: RefreshToken) -> None:
        if self._state.token_by_hash(token.token_hash) is not None:
            raise ValueError("duplicate token_hash")
        self.seen[token.id] = token
        self._state.tokens[token.id] = _detached(token)

    async def update(self, token: RefreshToken) -> None:
        if token.id not in self._state.tokens:
            raise LookupError(f"RefreshToken {token.id} does not exist")
        self.seen[token.id] = token
        self._state.tokens[token.id] = _detached(token)

    async def delete_expired_by_user_id(self, user_id: UUID, now: datetime) -> int:
        expired = [
            t.id for t in self._state.tokens_of(user_id) if t.expires_at <= now
        ]
        for token_id in expired:
            del self._state.tokens[token_id]
        return len(expired)

    async def delete_expired(self, now: datetime) -> int:
        expired = [t.id for t in self._state.tokens.values() if t.expires_at <= now]
        for token_id in expired:
            del self._state.tokens[token_id]
        return len(expired)


class InMemoryUnitOfWork:
    """Unit of work over a private copy of the store."""

    def __init__(self, store: InMemoryStore, event_bus: Any) -> None:
        self._store = store
        self._event_bus = event_bus
        self._state = InMemoryStore(
            users=dict(store.users),
            roles=dict(store.roles),
            tokens=dict(store.tokens),
        )
        self.committed = False
        self.rolled_back = False

        self.users = InMemoryUserRepository(self._state)
        self.roles = InMemoryRoleRepository(self._state)
        self.refresh_tokens = InMemoryRefreshTokenRepository(self._state)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if not self.committed:
            await self.rollback()

    async def commit(self) -> None:
        self._store.users = self._state.users
        self._store.roles = self._state.roles
        self._store.tokens = self._state.tokens
        self._store.commit_count += 1
        self.committed = True

        aggregates: list[AggregateRoot] = [
            *self.users.seen.values(),
            *self.refresh_tokens.seen.values(),
        ]
        for aggregate in aggregates:
            for event in aggregate.pull_domain_events():
                await self._event_bus.publish(event)

    async def rollback(self) -> None:
        self.rolled_back = True
        for aggregate in [*self.users.seen.values(), *self.refresh_tokens.seen.values()]:
            aggregate.pull_domain_events()


class InMemoryUnitOfWorkFactory:
    """Callable returning a fresh InMemoryUnitOfWork; remembers each one."""

    def __init__(self, store: InMemoryStore, event_bus: Any) -> None:
        self.store = store
        self.event_bus = event_bus
        self.created: list[InMemoryUnitOfWork] = []

    def __call__(self) -> InMemoryUnitOfWork:
        uow = InMemoryUnitOfWork(self.store, self.event_bus)
        self.created.append(uow)
        return uow


class RecordingEventBus:
    """Records every published event, then forwards to subscribers."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []
        self._handlers: dict[type[DomainEvent], list[Any]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], handler: Any) -> None:
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)
        for handler in self._handlers.get(type(event), []):
            await handler(event)

    def of_type(self, event_type: type[_EventT]) -> list[_EventT]:
        return [e for e in self.events if type(e) is event_type]

    def types(self) -> list[type[DomainEvent]]:
        return [type(e) for e in self.events]

"""Event bus protocol (port) for domain events.

Publisher-subscriber routing of domain events to async handlers. The unit of
work is the only publisher: it hands over an aggregate's events once the
transaction that produced them has committed.

Implementations:
    - InMemoryEventBus: src/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> async def on_roles_changed(event: UserRolesChanged) -> None:
    ...     await permission_service.invalidate_permissions_cache(event.user_id)
    >>> event_bus.subscribe(UserRolesChanged, on_roles_changed)
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[Any], Awaitable[None]]
"""Async side-effect handler receiving one event."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. Fail-open: one handler failure must not stop the others, and
           publish() never raises to the publisher.
        2. Exact type routing: handlers receive only events of the type they
           subscribed to (no inheritance matching).
        3. No ordering guarantees between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register ``handler`` for events of exactly ``event_type``."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every handler registered for its type.

        No handlers is a no-op. Handler exceptions are logged, not raised.
        """
        ...

"""Aggregate root base: collects domain events raised during a command.

Events stay on the aggregate until the unit of work pulls them after a
successful commit. A rollback discards the aggregate together with its
pending events.
"""

from dataclasses import dataclass, field

from src.domain.events.base_event import DomainEvent


@dataclass(kw_only=True)
class AggregateRoot:
    """Mixin-style base for entities that raise domain events."""

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events raised since the last pull (read-only view)."""
        return tuple(self._domain_events)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return pending events and clear them from the aggregate."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def _raise_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

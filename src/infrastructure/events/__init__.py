"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: fail-open, single-process event bus

Event Handlers:
    - SecurityLoggingHandler: structured security log for refresh token events
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]

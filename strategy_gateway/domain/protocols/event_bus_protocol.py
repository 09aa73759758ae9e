"""Event bus protocol (port) for domain events.

Event stores publish each event here after it has been durably appended.
Subscribers (the strategy projector, logging) react asynchronously from the
point of view of the command handler that produced the event.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (in-memory)
    - Container provides the factory function

Usage:
    >>> event_bus = get_event_bus()
    >>>
    >>> async def on_created(event: StrategyCreated) -> None:
    ...     await projection.upsert(Strategy.from_payload(event.data))
    >>>
    >>> event_bus.subscribe(StrategyCreated, on_created)
    >>> await event_bus.publish(StrategyCreated(created_by="alice", data=payload))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from strategy_gateway.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[Any], Awaitable[None]]
"""Async callable accepting a single DomainEvent (or subclass) and returning None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT propagate to the publisher.
        2. **Async support**: All handlers are coroutines.
        3. **Type-based routing**: Handlers registered for an event type only
           receive events of exactly that type.
        4. **No ordering guarantees** between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an event handler for a specific event type.

        Args:
            event_type: Class of event to handle (exact type match).
            handler: Async function called with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all registered handlers.

        Never raises because of handler failures. Publishing an event with no
        subscribers is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...

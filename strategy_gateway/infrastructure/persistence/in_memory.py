"""In-memory event store and strategy projection.

Process-local adapters for development, tests and single-instance
deployments (``storage_backend="memory"``). State is lost on restart.

Each adapter guards its own state with an ``asyncio.Lock``. The locks keep
each adapter internally consistent; they do NOT make the gateway's
check-then-append sequence atomic.
"""

import asyncio

from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.domain.events.base_event import DomainEvent
from strategy_gateway.domain.protocols.event_bus_protocol import EventBusProtocol


class InMemoryEventStore:
    """Append-only event log held in a Python list.

    Implements EventStoreProtocol. Publishes each event to the event bus
    after it has been appended.
    """

    def __init__(self, event_bus: EventBusProtocol | None = None) -> None:
        """Initialize the event store.

        Args:
            event_bus: Bus to publish appended events to. None disables
                publishing.
        """
        self._events: list[DomainEvent] = []
        self._lock = asyncio.Lock()
        self._event_bus = event_bus

    async def append(self, event: DomainEvent) -> None:
        """Append an event, then publish it.

        Args:
            event: Domain event to record.
        """
        async with self._lock:
            self._events.append(event)

        if self._event_bus is not None:
            await self._event_bus.publish(event)

    async def list_events(self) -> list[DomainEvent]:
        """Return all stored events, oldest first."""
        async with self._lock:
            return list(self._events)


class InMemoryStrategyProjection:
    """Current-state strategy view keyed by name.

    Implements StrategyProjectionWriterProtocol.
    """

    def __init__(self) -> None:
        self._strategies: dict[str, Strategy] = {}
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[Strategy]:
        """List strategies ordered by name."""
        async with self._lock:
            return [self._strategies[name] for name in sorted(self._strategies)]

    async def get_by_name(self, name: str) -> Strategy | None:
        """Return the strategy with this name, or None."""
        async with self._lock:
            return self._strategies.get(name)

    async def upsert(self, strategy: Strategy) -> None:
        """Insert or replace the strategy with the same name."""
        async with self._lock:
            self._strategies[strategy.name] = strategy

    async def remove(self, name: str) -> None:
        """Remove a strategy by name. Absent names are ignored."""
        async with self._lock:
            self._strategies.pop(name, None)

    async def clear(self) -> None:
        """Remove every strategy."""
        async with self._lock:
            self._strategies.clear()

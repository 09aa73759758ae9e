"""Event store protocol (port) for the append-only event log.

Command handlers append domain events here; nothing else in the gateway
writes state. The log itself, and how the projection is rebuilt from it,
are infrastructure concerns.

Contract:
    - ``append`` durably records one event or raises. Any exception is an
      infrastructure fault; handlers map it to a server-side failure.
    - Append is single-shot: no retries, no deduplication. Two appends of
      events for the same strategy name both succeed.
    - After a successful append, adapters publish the event to the event bus
      so subscribers (the projector) can react. The gateway does not wait on
      or depend on that reaction.
"""

from typing import Protocol

from strategy_gateway.domain.events.base_event import DomainEvent


class EventStoreProtocol(Protocol):
    """Protocol for append-only event log adapters."""

    async def append(self, event: DomainEvent) -> None:
        """Append an event to the log.

        Args:
            event: Immutable domain event.

        Raises:
            Exception: Any infrastructure failure (storage unavailable, etc.).
        """
        ...

    async def list_events(self) -> list[DomainEvent]:
        """Return all stored events in append order.

        Returns:
            Events, oldest first.
        """
        ...

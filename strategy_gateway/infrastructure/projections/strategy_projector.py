"""Strategy projector.

Keeps the strategy projection in sync with the event log:

- ``StrategyCreated``: upsert. A second creation event for an existing name
  replaces it (last writer wins), so duplicate events produced by
  concurrent creates converge to a single strategy.
- ``StrategyDeleted``: remove. Removing an absent name is a no-op.

Runs as an event-bus subscriber, or offline through ``replay``.
"""

from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.domain.events.base_event import DomainEvent
from strategy_gateway.domain.events.strategy_events import (
    StrategyCreated,
    StrategyDeleted,
)
from strategy_gateway.domain.protocols.event_bus_protocol import EventBusProtocol
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionWriterProtocol,
)


class StrategyProjector:
    """Applies strategy events to a writable projection."""

    def __init__(
        self,
        projection: StrategyProjectionWriterProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._projection = projection
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe the projector's handlers on an event bus."""
        event_bus.subscribe(StrategyCreated, self.on_strategy_created)
        event_bus.subscribe(StrategyDeleted, self.on_strategy_deleted)

    async def on_strategy_created(self, event: StrategyCreated) -> None:
        await self._projection.upsert(Strategy.from_payload(event.data))
        self._logger.debug(
            "strategy_projected",
            strategy_name=event.strategy_name,
            event_id=str(event.event_id),
        )

    async def on_strategy_deleted(self, event: StrategyDeleted) -> None:
        await self._projection.remove(event.strategy_name)
        self._logger.debug(
            "strategy_unprojected",
            strategy_name=event.strategy_name,
            event_id=str(event.event_id),
        )

    async def replay(self, events: list[DomainEvent]) -> int:
        """Rebuild the projection from scratch.

        Clears the projection, then applies the events in order. Events of
        other types are skipped.

        Args:
            events: Event log, oldest first.

        Returns:
            Number of events applied.
        """
        await self._projection.clear()

        applied = 0
        for event in events:
            match event:
                case StrategyCreated():
                    await self.on_strategy_created(event)
                case StrategyDeleted():
                    await self.on_strategy_deleted(event)
                case _:
                    continue
            applied += 1

        self._logger.info("strategy_projection_replayed", events_applied=applied)
        return applied

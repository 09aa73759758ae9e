"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based handler registry. Event
stores publish every appended event here; the strategy projector is the main
subscriber.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type -> list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(StrategyCreated, projector.on_strategy_created)
    >>> await bus.publish(StrategyCreated(created_by="alice", data=payload))
"""

import asyncio
from collections import defaultdict

from strategy_gateway.domain.events.base_event import DomainEvent
from strategy_gateway.domain.protocols.event_bus_protocol import EventHandler
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Handlers for one event run concurrently. A failing handler is logged at
    warning level and never propagates to the publisher.

    Thread Safety:
        - NOT thread-safe (single-process asyncio design)

    Attributes:
        _handlers: Event class -> list of async handlers (exact type match).
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning) and publishing (debug).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async function called with each published event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
            - Handlers should be idempotent
        """
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        No handlers is a no-op. Handler exceptions are logged, never raised.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(
                        handlers[idx], "__name__", repr(handlers[idx])
                    ),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )

"""Event bus and projection factories.

The event bus is the wiring point between the event store and the
projection: the strategy projector subscribes here at construction time.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from strategy_gateway.core.config import get_settings
from strategy_gateway.core.container.infrastructure import get_database, get_logger

if TYPE_CHECKING:
    from strategy_gateway.domain.protocols.event_bus_protocol import EventBusProtocol
    from strategy_gateway.domain.protocols.strategy_projection_protocol import (
        StrategyProjectionWriterProtocol,
    )


@lru_cache()
def get_strategy_projection() -> "StrategyProjectionWriterProtocol":
    """Get the strategy projection singleton (app-scoped).

    Handlers only see it through the read-only StrategyProjectionProtocol.

    Returns:
        Projection matching ``settings.storage_backend``.

    Raises:
        ValueError: If ``storage_backend`` is not supported.
    """
    settings = get_settings()

    if settings.storage_backend == "memory":
        from strategy_gateway.infrastructure.persistence.in_memory import (
            InMemoryStrategyProjection,
        )

        return InMemoryStrategyProjection()
    elif settings.storage_backend == "database":
        from strategy_gateway.infrastructure.persistence.repositories import (
            SqlStrategyProjection,
        )

        return SqlStrategyProjection(database=get_database())
    else:
        raise ValueError(
            f"Unsupported STORAGE_BACKEND: {settings.storage_backend}. "
            f"Supported: 'memory', 'database'"
        )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns the adapter selected by ``settings.event_bus_type`` with the
    strategy projector already subscribed.

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If ``event_bus_type`` is not supported.
    """
    from strategy_gateway.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )
    from strategy_gateway.infrastructure.projections.strategy_projector import (
        StrategyProjector,
    )

    settings = get_settings()

    if settings.event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(logger=get_logger())
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {settings.event_bus_type}. "
            f"Supported: 'in-memory'"
        )

    projector = StrategyProjector(
        projection=get_strategy_projection(), logger=get_logger()
    )
    projector.register(event_bus)

    return event_bus

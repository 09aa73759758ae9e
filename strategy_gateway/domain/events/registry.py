"""Domain events registry.

Maps each EventType to its event class. Used to rebuild typed events from
event-log records (replay) and by tests to verify every event type has a
class and vice versa.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from strategy_gateway.domain.enums.event_type import EventType
from strategy_gateway.domain.events.base_event import DomainEvent
from strategy_gateway.domain.events.strategy_events import (
    StrategyCreated,
    StrategyDeleted,
)

EVENT_REGISTRY: dict[EventType, type[DomainEvent]] = {
    EventType.STRATEGY_CREATED: StrategyCreated,
    EventType.STRATEGY_DELETED: StrategyDeleted,
}


def event_from_record(
    *,
    event_type: str,
    created_by: str,
    data: dict[str, Any],
    event_id: UUID,
    occurred_at: datetime,
) -> DomainEvent:
    """Rebuild a typed domain event from stored fields.

    Args:
        event_type: Stored type name (e.g., "strategy-created").
        created_by: Stored acting identity.
        data: Stored payload.
        event_id: Stored event identifier.
        occurred_at: Stored event timestamp.

    Returns:
        Instance of the registered event class.

    Raises:
        ValueError: If the type name is unknown.
    """
    event_cls = EVENT_REGISTRY[EventType(event_type)]
    return event_cls(
        created_by=created_by,
        data=data,
        event_id=event_id,
        occurred_at=occurred_at,
    )

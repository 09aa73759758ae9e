"""Domain events module.

Usage:
    >>> from strategy_gateway.domain.events import StrategyCreated
    >>>
    >>> event = StrategyCreated(created_by="alice", data={"name": "default"})
    >>> await event_store.append(event)
"""

from strategy_gateway.domain.events.base_event import DomainEvent
from strategy_gateway.domain.events.registry import EVENT_REGISTRY, event_from_record
from strategy_gateway.domain.events.strategy_events import (
    StrategyCreated,
    StrategyDeleted,
)

__all__ = [
    "DomainEvent",
    "EVENT_REGISTRY",
    "StrategyCreated",
    "StrategyDeleted",
    "event_from_record",
]

"""Domain enums."""

from strategy_gateway.domain.enums.event_type import EventType

__all__ = ["EventType"]

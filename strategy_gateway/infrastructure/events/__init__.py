"""Event bus adapters."""

from strategy_gateway.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]

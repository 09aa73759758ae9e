"""Strategy domain events.

Two events describe every mutation of the strategy registry:

- StrategyCreated: ``data`` is the full strategy payload as submitted.
- StrategyDeleted: ``data`` is ``{"name": <strategy name>}``.

Neither event is updated or removed once appended.
"""

from dataclasses import dataclass

from strategy_gateway.domain.enums.event_type import EventType
from strategy_gateway.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class StrategyCreated(DomainEvent):
    """A strategy definition was submitted for creation."""

    event_type = EventType.STRATEGY_CREATED

    @property
    def strategy_name(self) -> str:
        """Name of the created strategy."""
        return self.data["name"]


@dataclass(frozen=True, kw_only=True, slots=True)
class StrategyDeleted(DomainEvent):
    """A strategy was deleted."""

    event_type = EventType.STRATEGY_DELETED

    @classmethod
    def for_name(cls, name: str, *, created_by: str) -> "StrategyDeleted":
        """Build the deletion event for a strategy name.

        Args:
            name: Name of the deleted strategy.
            created_by: Acting identity.

        Returns:
            StrategyDeleted with ``data == {"name": name}``.
        """
        return cls(created_by=created_by, data={"name": name})

    @property
    def strategy_name(self) -> str:
        """Name of the deleted strategy."""
        return self.data["name"]

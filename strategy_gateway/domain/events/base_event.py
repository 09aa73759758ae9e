"""Base domain event class.

Domain events record facts about mutations of the strategy registry. They are
the ONLY way the gateway changes state: a command handler validates the
command and appends one event to the event log; the projection is derived from
the log elsewhere.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID v7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - created_by attribution on every event (may be the anonymous sentinel)
    - Class-level event_type naming the record type in the event log

Usage:
    >>> event = StrategyCreated(created_by="alice", data={"name": "default"})
    >>> event.to_record()["type"]
    'strategy-created'
"""

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID

from uuid_extensions import uuid7

from strategy_gateway.domain.enums.event_type import EventType


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (StrategyCreated, NOT CreateStrategy)
        3. Set the ``event_type`` class variable
        4. Be frozen dataclasses with kw_only=True

    Attributes:
        created_by: Acting identity that caused the event. Always present;
            the identity extractor yields a sentinel when the caller is
            anonymous.
        data: Event payload. Copied on construction so later changes to the
            caller's dict cannot leak into the recorded fact.
        event_id: Unique identifier for this event instance (UUID v7).
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_type: ClassVar[EventType]

    created_by: str
    data: dict[str, Any]
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", deepcopy(self.data))

    def to_record(self) -> dict[str, Any]:
        """Render the event as an event-log record.

        Returns:
            Dict with ``id``, ``type``, ``createdBy``, ``createdAt`` and ``data``.
        """
        return {
            "id": str(self.event_id),
            "type": self.event_type.value,
            "createdBy": self.created_by,
            "createdAt": self.occurred_at.isoformat(),
            "data": deepcopy(self.data),
        }

"""Event log database model.

Append-only table holding every strategy domain event. Rows are never
updated or deleted by the application. There is no uniqueness
constraint on strategy name: duplicate ``strategy-created`` events for one
name are valid history.
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from strategy_gateway.infrastructure.persistence.base import BaseModel


class EventLogModel(BaseModel):
    """Event log row - IMMUTABLE.

    Fields:
        id: Event identifier (UUID v7 from the domain event)
        created_at: When the event occurred (from the domain event)
        type: Event type name (e.g., "strategy-created")
        created_by: Acting identity
        data: Event payload (JSON)
    """

    __tablename__ = "events"

    type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Event type name (strategy-created, strategy-deleted)",
    )

    created_by: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Acting identity that caused the event",
    )

    data: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="Event payload",
    )

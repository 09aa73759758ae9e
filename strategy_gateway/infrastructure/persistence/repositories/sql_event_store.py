"""SQL event store implementation.

SQLAlchemy implementation of EventStoreProtocol. Maps between DomainEvent
objects and EventLogModel rows.
"""

from datetime import UTC

from sqlalchemy import select

from strategy_gateway.domain.events.base_event import DomainEvent
from strategy_gateway.domain.events.registry import event_from_record
from strategy_gateway.domain.protocols.event_bus_protocol import EventBusProtocol
from strategy_gateway.infrastructure.persistence.database import Database
from strategy_gateway.infrastructure.persistence.models.event_log import EventLogModel


class SqlEventStore:
    """Append-only event log stored in the ``events`` table.

    **Implementation Notes**:
    - One session (and commit) per append
    - The event is published only after its row has been committed
    - No update or delete methods
    """

    def __init__(
        self, database: Database, event_bus: EventBusProtocol | None = None
    ) -> None:
        """Initialize the event store.

        Args:
            database: Database providing sessions.
            event_bus: Bus to publish committed events to. None disables
                publishing.
        """
        self._database = database
        self._event_bus = event_bus

    async def append(self, event: DomainEvent) -> None:
        """Insert the event row, commit, then publish.

        Args:
            event: Domain event to record.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the insert or commit fails.
        """
        async with self._database.get_session() as session:
            session.add(self._to_model(event))

        if self._event_bus is not None:
            await self._event_bus.publish(event)

    async def list_events(self) -> list[DomainEvent]:
        """Return all stored events, oldest first."""
        stmt = select(EventLogModel).order_by(
            EventLogModel.created_at, EventLogModel.id
        )
        async with self._database.get_session() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()

        return [self._to_event(m) for m in models]

    def _to_model(self, event: DomainEvent) -> EventLogModel:
        return EventLogModel(
            id=event.event_id,
            created_at=event.occurred_at,
            type=event.event_type.value,
            created_by=event.created_by,
            data=event.data,
        )

    def _to_event(self, model: EventLogModel) -> DomainEvent:
        occurred_at = model.created_at
        # SQLite returns naive datetimes
        if occurred_at.tzinfo is None:
            occurred_at = occurred_at.replace(tzinfo=UTC)

        return event_from_record(
            event_type=model.type,
            created_by=model.created_by,
            data=model.data,
            event_id=model.id,
            occurred_at=occurred_at,
        )

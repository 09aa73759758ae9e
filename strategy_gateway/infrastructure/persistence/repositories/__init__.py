"""SQLAlchemy adapters for the event store and strategy projection."""

from strategy_gateway.infrastructure.persistence.repositories.sql_event_store import (
    SqlEventStore,
)
from strategy_gateway.infrastructure.persistence.repositories.sql_strategy_projection import (
    SqlStrategyProjection,
)

__all__ = ["SqlEventStore", "SqlStrategyProjection"]

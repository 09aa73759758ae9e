"""SQL strategy projection implementation.

SQLAlchemy implementation of StrategyProjectionWriterProtocol over the
``strategies`` table. Maps between the Strategy entity and StrategyModel.
"""

import asyncio

from sqlalchemy import delete, select

from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.infrastructure.persistence.database import Database
from strategy_gateway.infrastructure.persistence.models.strategy import StrategyModel


class SqlStrategyProjection:
    """Current-state strategy view stored in the ``strategies`` table.

    **Implementation Notes**:
    - Reads open a short-lived session each
    - Writes are serialized within the process so that concurrent upserts
      of one name update a single row instead of racing on the unique index
    """

    def __init__(self, database: Database) -> None:
        """Initialize the projection.

        Args:
            database: Database providing sessions.
        """
        self._database = database
        self._write_lock = asyncio.Lock()

    async def list_all(self) -> list[Strategy]:
        """List strategies ordered by name."""
        stmt = select(StrategyModel).order_by(StrategyModel.name)
        async with self._database.get_session() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()

        return [self._to_entity(m) for m in models]

    async def get_by_name(self, name: str) -> Strategy | None:
        """Return the strategy with this name, or None."""
        stmt = select(StrategyModel).where(StrategyModel.name == name)
        async with self._database.get_session() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def upsert(self, strategy: Strategy) -> None:
        """Insert the strategy or replace the payload of the existing row."""
        async with self._write_lock, self._database.get_session() as session:
            stmt = select(StrategyModel).where(StrategyModel.name == strategy.name)
            result = await session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                session.add(
                    StrategyModel(name=strategy.name, payload=strategy.to_payload())
                )
            else:
                existing.payload = strategy.to_payload()

    async def remove(self, name: str) -> None:
        """Delete the row for this name. Absent names are ignored."""
        async with self._write_lock, self._database.get_session() as session:
            await session.execute(
                delete(StrategyModel).where(StrategyModel.name == name)
            )

    async def clear(self) -> None:
        """Delete every row."""
        async with self._write_lock, self._database.get_session() as session:
            await session.execute(delete(StrategyModel))

    def _to_entity(self, model: StrategyModel) -> Strategy:
        return Strategy.from_payload(model.payload)

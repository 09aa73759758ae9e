"""Strategy projection database model.

One row per strategy name, maintained by the strategy projector.
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from strategy_gateway.infrastructure.persistence.base import BaseMutableModel


class StrategyModel(BaseMutableModel):
    """Strategy projection row.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at, updated_at: Row timestamps
        name: Unique strategy name
        payload: Full strategy record including ``name`` (JSON)
    """

    __tablename__ = "strategies"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique strategy name",
    )

    payload: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="Strategy record as submitted",
    )

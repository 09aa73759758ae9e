"""SQLAlchemy models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from strategy_gateway.infrastructure.persistence.models.event_log import EventLogModel
from strategy_gateway.infrastructure.persistence.models.strategy import StrategyModel

__all__ = ["EventLogModel", "StrategyModel"]

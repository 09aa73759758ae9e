"""Query handlers."""

from strategy_gateway.application.queries.handlers.get_strategy_handler import (
    GetStrategyHandler,
)
from strategy_gateway.application.queries.handlers.list_strategies_handler import (
    STRATEGY_LIST_VERSION,
    ListStrategiesHandler,
    StrategyListResult,
)

__all__ = [
    "GetStrategyHandler",
    "ListStrategiesHandler",
    "STRATEGY_LIST_VERSION",
    "StrategyListResult",
]

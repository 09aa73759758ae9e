"""Strategy queries (CQRS read operations)."""

from strategy_gateway.application.queries.strategy_queries import (
    GetStrategy,
    ListStrategies,
)

__all__ = ["GetStrategy", "ListStrategies"]

"""Application services."""

from strategy_gateway.application.services.strategy_validator import (
    StrategyValidator,
)

__all__ = ["StrategyValidator"]

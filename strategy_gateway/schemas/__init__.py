"""Request and response schemas for the HTTP API."""

from strategy_gateway.schemas.strategy_schemas import (
    StrategyListResponse,
    StrategyResponse,
)

__all__ = ["StrategyListResponse", "StrategyResponse"]

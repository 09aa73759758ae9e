"""Projectors deriving read models from domain events."""

from strategy_gateway.infrastructure.projections.strategy_projector import (
    StrategyProjector,
)

__all__ = ["StrategyProjector"]

"""Domain entities."""

from strategy_gateway.domain.entities.strategy import Strategy

__all__ = ["Strategy"]

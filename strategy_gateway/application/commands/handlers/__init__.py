"""Command handlers."""

from strategy_gateway.application.commands.handlers.create_strategy_handler import (
    CreateStrategyHandler,
)
from strategy_gateway.application.commands.handlers.delete_strategy_handler import (
    DeleteStrategyHandler,
)

__all__ = ["CreateStrategyHandler", "DeleteStrategyHandler"]

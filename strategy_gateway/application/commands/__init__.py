"""Strategy commands (CQRS write operations)."""

from strategy_gateway.application.commands.strategy_commands import (
    CreateStrategy,
    DeleteStrategy,
)

__all__ = ["CreateStrategy", "DeleteStrategy"]

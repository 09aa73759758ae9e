"""Logging adapters."""

from strategy_gateway.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]

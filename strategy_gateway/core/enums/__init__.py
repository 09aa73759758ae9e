"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from strategy_gateway.core.enums import ErrorCode, Environment
"""

from strategy_gateway.core.enums.environment import Environment
from strategy_gateway.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]

"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Validation primitives returning Result types

The core module has NO dependencies on other application layers.
"""

from strategy_gateway.core.enums import ErrorCode
from strategy_gateway.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from strategy_gateway.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]

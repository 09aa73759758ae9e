"""Core errors package.

Usage:
    from strategy_gateway.core.errors import DomainError, ValidationError
"""

from strategy_gateway.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from strategy_gateway.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]

"""Domain validators.

Pure functions that raise ValueError, reusable from Pydantic Annotated types.
"""

from strategy_gateway.domain.validators.functions import (
    STRATEGY_NAME_FORMAT_MESSAGE,
    STRATEGY_NAME_PATTERN,
    STRATEGY_NAME_REQUIRED_MESSAGE,
    validate_strategy_name,
)

__all__ = [
    "STRATEGY_NAME_FORMAT_MESSAGE",
    "STRATEGY_NAME_PATTERN",
    "STRATEGY_NAME_REQUIRED_MESSAGE",
    "validate_strategy_name",
]

"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
"""

from strategy_gateway.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]

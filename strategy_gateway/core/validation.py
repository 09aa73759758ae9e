"""Validation primitives for input validation.

Every function returns a Result so that callers can collect several field
violations before deciding how to fail.

Usage:
    from strategy_gateway.core.validation import validate_not_empty

    match validate_not_empty(payload.get("name"), "name"):
        case Success(value=name):
            ...
        case Failure(error=error):
            print(error.message)
"""

import re
from typing import Any

from strategy_gateway.core.enums import ErrorCode
from strategy_gateway.core.errors import ValidationError
from strategy_gateway.core.result import Failure, Result, Success


def validate_not_empty(
    value: Any, field_name: str, message: str | None = None
) -> Result[Any, ValidationError]:
    """Validate that a value is present and not blank.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.
        message: Optional override for the error message.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.FIELD_REQUIRED,
                message=message or f"{field_name} cannot be empty",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_pattern(
    value: Any,
    pattern: re.Pattern[str],
    field_name: str,
    message: str | None = None,
) -> Result[str, ValidationError]:
    """Validate that a value is a string fully matching a compiled pattern.

    Non-string values (including None) never match.

    Args:
        value: Value to validate.
        pattern: Compiled regular expression; matched with ``fullmatch``.
        field_name: Name of the field being validated.
        message: Optional override for the error message.

    Returns:
        Success with value if it matches, Failure with ValidationError otherwise.
    """
    if not isinstance(value, str) or pattern.fullmatch(value) is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=message or f"{field_name} must match format {pattern.pattern}",
                field=field_name,
            )
        )
    return Success(value=value)

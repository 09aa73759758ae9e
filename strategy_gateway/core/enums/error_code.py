"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances. They end up in the ``code`` field of RFC 7807 field
errors, so values are stable snake_case strings.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    FIELD_REQUIRED = "field_required"
    INVALID_FORMAT = "invalid_format"

    # Resource errors
    STRATEGY_NOT_FOUND = "strategy_not_found"

    # Conflict errors
    STRATEGY_ALREADY_EXISTS = "strategy_already_exists"

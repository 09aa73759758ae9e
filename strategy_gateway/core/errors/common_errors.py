"""Common error classes used across layers.

Error Types:
- ValidationError: Input validation failure on a single field
- NotFoundError: Referenced resource absent from the projection
- ConflictError: Uniqueness conflict (duplicate name)

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.FIELD_REQUIRED,
        message="Name is required",
        field="name",
    ))
"""

from dataclasses import dataclass

from strategy_gateway.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Strategy).
        resource_id: Identifier of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identifier).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict (name).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None

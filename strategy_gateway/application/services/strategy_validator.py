"""Create-command validation pipeline.

Two sequential stages, short-circuiting on the first failing stage:

1. ``validate_structure``: pure checks on the submitted payload. Every check
   runs and all violations are collected, so a missing name reports both the
   "required" and the "format" violation. No I/O.
2. ``ensure_name_available``: uniqueness precondition against the projection.

Stage 2 is NOT atomic with the event append that follows it. Two concurrent
creates for the same new name can both observe "not found" and both append
a StrategyCreated event. The projector tolerates this (last writer wins);
nothing here locks.

Usage:
    validator = StrategyValidator(projection=projection)

    match validator.validate_structure(payload):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=name):
            result = await validator.ensure_name_available(name)
"""

from typing import Any

from strategy_gateway.application.errors import ApplicationError, ApplicationErrorCode
from strategy_gateway.core.enums import ErrorCode
from strategy_gateway.core.errors import ConflictError, ValidationError
from strategy_gateway.core.result import Failure, Result, Success
from strategy_gateway.core.validation import validate_not_empty, validate_pattern
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionProtocol,
)
from strategy_gateway.domain.validators import (
    STRATEGY_NAME_FORMAT_MESSAGE,
    STRATEGY_NAME_PATTERN,
    STRATEGY_NAME_REQUIRED_MESSAGE,
)


class StrategyValidator:
    """Validation pipeline for CreateStrategy payloads.

    Dependencies (injected via constructor):
        - StrategyProjectionProtocol: For the uniqueness check
    """

    def __init__(self, projection: StrategyProjectionProtocol) -> None:
        """Initialize validator with dependencies.

        Args:
            projection: Read-only strategy projection.
        """
        self._projection = projection

    def validate_structure(
        self, payload: dict[str, Any]
    ) -> Result[str, ApplicationError]:
        """Run the structural checks on a create payload.

        Args:
            payload: Submitted strategy record.

        Returns:
            Success(name): All checks passed.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED with every
                violated check in ``field_errors``.
        """
        name = payload.get("name")
        checks = (
            validate_not_empty(name, "name", STRATEGY_NAME_REQUIRED_MESSAGE),
            validate_pattern(
                name, STRATEGY_NAME_PATTERN, "name", STRATEGY_NAME_FORMAT_MESSAGE
            ),
        )
        violations: tuple[ValidationError, ...] = tuple(
            check.error for check in checks if isinstance(check, Failure)
        )

        if violations:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message="Strategy validation failed",
                    domain_error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="Strategy validation failed",
                        field="name",
                    ),
                    field_errors=violations,
                )
            )

        return Success(value=name)

    async def ensure_name_available(
        self, name: str
    ) -> Result[None, ApplicationError]:
        """Check that no strategy with this name exists in the projection.

        Exceptions raised by the projection propagate to the caller.

        Args:
            name: Structurally valid strategy name.

        Returns:
            Success(None): Name not present in the current snapshot.
            Failure(ApplicationError): NAME_EXISTS.
        """
        existing = await self._projection.get_by_name(name)
        if existing is None:
            return Success(value=None)

        message = f"A strategy named '{name}' already exists."
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.NAME_EXISTS,
                message=message,
                domain_error=ConflictError(
                    code=ErrorCode.STRATEGY_ALREADY_EXISTS,
                    message=message,
                    resource_type="Strategy",
                    conflicting_field="name",
                ),
                details={"name": name},
            )
        )

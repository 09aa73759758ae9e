"""Application layer error types.

Every command and query handler returns ``Result[T, ApplicationError]``.
The ``code`` is the tag of the failure variant; the presentation layer maps
each code to exactly one external outcome.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from strategy_gateway.core.errors import DomainError, ValidationError


class ApplicationErrorCode(Enum):
    """Application-level error codes (failure taxonomy).

    Client-caused:
        COMMAND_VALIDATION_FAILED: One or more structural field violations.
        NAME_EXISTS: A strategy with the submitted name already exists.
        NOT_FOUND: The referenced strategy is absent from the projection.

    Server-side faults:
        COMMAND_EXECUTION_FAILED: Unexpected failure while handling a command
            (including event store append failures).
        QUERY_FAILED: Unexpected failure while reading the projection.
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    NAME_EXISTS = "name_exists"
    NOT_FOUND = "not_found"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (failure variant tag).
        message: Human-readable error message, safe to show to callers for
            client-caused codes. Fault messages are never rendered.
        domain_error: Original domain error, when one exists.
        field_errors: Field-level violations for COMMAND_VALIDATION_FAILED.
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NAME_EXISTS,
        ...     message="A strategy named 'default' already exists.",
        ...     details={"name": "default"},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    field_errors: tuple[ValidationError, ...] = ()
    details: dict[str, str] | None = None

    @property
    def is_fault(self) -> bool:
        """Whether this error is a server-side fault rather than a client error."""
        return self.code in {
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
            ApplicationErrorCode.QUERY_FAILED,
        }

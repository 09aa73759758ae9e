"""Outcome mapper: ApplicationError to HTTP response.

Every ApplicationErrorCode maps to exactly one external outcome:

| Code                      | Status | Body                          |
|---------------------------|--------|-------------------------------|
| COMMAND_VALIDATION_FAILED | 400    | Problem Details with errors[] |
| NAME_EXISTS               | 403    | Problem Details               |
| NOT_FOUND                 | 404    | Problem Details, or empty     |
| COMMAND_EXECUTION_FAILED  | 500    | empty                         |
| QUERY_FAILED              | 500    | empty                         |

Not-found on delete is answered with an empty body (``problem_on_not_found
=False``). Fault responses never carry internal detail.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from typing import assert_never

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

from strategy_gateway.application.errors import ApplicationError, ApplicationErrorCode
from strategy_gateway.core.config import settings
from strategy_gateway.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build HTTP error responses from application errors.

    Example:
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=result.error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
        *,
        problem_on_not_found: bool = True,
    ) -> Response:
        """Convert ApplicationError to its HTTP outcome.

        Args:
            error: Application layer error to convert.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.
            problem_on_not_found: Render NOT_FOUND as Problem Details (get)
                rather than an empty body (delete).

        Returns:
            JSONResponse with ProblemDetails for client errors, or a bare
            Response for empty-body outcomes.
        """
        match error.code:
            case ApplicationErrorCode.COMMAND_VALIDATION_FAILED:
                return ErrorResponseBuilder._problem(
                    error,
                    request,
                    trace_id,
                    status_code=status.HTTP_400_BAD_REQUEST,
                    title="Validation Failed",
                    errors=[
                        ErrorDetail(
                            field=violation.field or "unknown",
                            code=violation.code.value,
                            message=violation.message,
                        )
                        for violation in error.field_errors
                    ],
                )
            case ApplicationErrorCode.NAME_EXISTS:
                return ErrorResponseBuilder._problem(
                    error,
                    request,
                    trace_id,
                    status_code=status.HTTP_403_FORBIDDEN,
                    title="Name Already Exists",
                )
            case ApplicationErrorCode.NOT_FOUND:
                if not problem_on_not_found:
                    return Response(status_code=status.HTTP_404_NOT_FOUND)
                return ErrorResponseBuilder._problem(
                    error,
                    request,
                    trace_id,
                    status_code=status.HTTP_404_NOT_FOUND,
                    title="Resource Not Found",
                )
            case (
                ApplicationErrorCode.COMMAND_EXECUTION_FAILED
                | ApplicationErrorCode.QUERY_FAILED
            ):
                return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
            case _:
                assert_never(error.code)

    @staticmethod
    def _problem(
        error: ApplicationError,
        request: Request,
        trace_id: str,
        *,
        status_code: int,
        title: str,
        errors: list[ErrorDetail] | None = None,
    ) -> JSONResponse:
        # Kebab-case slug, same convention as the global exception handlers
        slug = error.code.value.replace("_", "-")
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{slug}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=errors or None,
            trace_id=trace_id or None,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

"""Global exception handlers for FastAPI application.

Convert exceptions that escape route functions into RFC 7807 Problem
Details responses.

Handlers:
    http_exception_handler: Converts HTTPException
    validation_exception_handler: Converts RequestValidationError (e.g., a
        POST body that is not a JSON object)
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from strategy_gateway.core.config import settings
from strategy_gateway.core.container import get_logger
from strategy_gateway.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for the problem type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 7807 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by a route, dependency or the router
            itself (unknown path, wrong method). FastAPI's HTTPException is
            a subclass.

    Returns:
        JSONResponse with ProblemDetails.
    """
    assert isinstance(exc, HTTPException)

    trace_id = getattr(request.state, "trace_id", None)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{_get_error_slug(exc.status_code)}",
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 7807 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse (422) with ProblemDetails including field errors.
    """
    assert isinstance(exc, RequestValidationError)

    trace_id = getattr(request.state, "trace_id", None)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "name"] -> "name"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "body",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_422_UNPROCESSABLE_CONTENT,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a generic 500 without internal detail.

    Args:
        request: FastAPI Request object.
        exc: Unhandled exception.

    Returns:
        JSONResponse with ProblemDetails (500 Internal Server Error).
    """
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

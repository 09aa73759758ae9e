"""Route metadata types for the API route registry.

The registry is the single source of truth for the API routes. Each entry
is a RouteMetadata instance that the generator turns into a FastAPI route.

Core types:
    RouteMetadata: Complete route specification
    HTTPMethod: HTTP method enum
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/strategies",
        handler=create_strategy,
        resource="strategies",
        tags=["Strategies"],
        summary="Create strategy",
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 500)
        description: Human-readable error description
        model: Optional Pydantic model for the response body

    Examples:
        >>> ErrorSpec(status=403, description="Strategy name already exists")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "strategies")
        tags: OpenAPI tags

    OpenAPI documentation:
        summary, description, operation_id

    Request/Response:
        response_model: Pydantic model for the success body (None for empty)
        status_code: Success status
        errors: Possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel

    deprecated: bool = False

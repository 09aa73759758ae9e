"""Route generator for the API route registry.

Converts RouteMetadata entries into FastAPI routes at application startup.

Usage:
    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter

from strategy_gateway.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            deprecated=metadata.deprecated,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Errors with a model document that model as the body. Errors without one
    are documented as empty-body responses.

    Example:
        >>> _build_responses([ErrorSpec(status=500, description="Server fault")])
        {500: {'description': 'Server fault'}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        entry: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            entry["model"] = error.model
        responses[error.status] = entry
    return responses

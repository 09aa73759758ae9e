"""API route registry - single source of truth for the v1 routes.

Usage:
    router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from strategy_gateway.presentation.routers.api.v1.errors.problem_details import (
    ProblemDetails,
)
from strategy_gateway.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from strategy_gateway.presentation.routers.api.v1.strategies import (
    create_strategy,
    delete_strategy,
    get_strategy,
    list_strategies,
)
from strategy_gateway.schemas.strategy_schemas import (
    StrategyListResponse,
    StrategyResponse,
)

_SERVER_FAULT = ErrorSpec(status=500, description="Server fault (empty body)")

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Strategies Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/strategies",
        handler=list_strategies,
        resource="strategies",
        tags=["Strategies"],
        summary="List strategies",
        description="Return every strategy in the current projection.",
        operation_id="list_strategies",
        response_model=StrategyListResponse,
        status_code=200,
        errors=[_SERVER_FAULT],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/strategies/{name}",
        handler=get_strategy,
        resource="strategies",
        tags=["Strategies"],
        summary="Get strategy",
        description="Return one strategy by name.",
        operation_id="get_strategy",
        response_model=StrategyResponse,
        status_code=200,
        errors=[
            ErrorSpec(
                status=404, description="Strategy not found", model=ProblemDetails
            ),
            _SERVER_FAULT,
        ],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/strategies",
        handler=create_strategy,
        resource="strategies",
        tags=["Strategies"],
        summary="Create strategy",
        description=(
            "Validate the submitted strategy and record a strategy-created "
            "event. The strategy becomes visible once the projection catches up."
        ),
        operation_id="create_strategy",
        response_model=None,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error", model=ProblemDetails),
            ErrorSpec(
                status=403,
                description="Strategy name already exists",
                model=ProblemDetails,
            ),
            _SERVER_FAULT,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/strategies/{name}",
        handler=delete_strategy,
        resource="strategies",
        tags=["Strategies"],
        summary="Delete strategy",
        description="Record a strategy-deleted event for an existing strategy.",
        operation_id="delete_strategy",
        response_model=None,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Strategy not found (empty body)"),
            _SERVER_FAULT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
]

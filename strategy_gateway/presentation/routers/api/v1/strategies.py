"""Strategies resource handlers.

Route functions for the strategy endpoints. Routes are registered via
ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_strategies  - List every strategy
    get_strategy     - Get one strategy by name
    create_strategy  - Record a StrategyCreated event
    delete_strategy  - Record a StrategyDeleted event

Each function builds a command or query, runs its handler, and maps the
Result: success outcomes here, failures through ErrorResponseBuilder.
"""

from typing import Annotated, Any

from fastapi import Body, Depends, Path, Request, status
from fastapi.responses import Response

from strategy_gateway.application.commands.handlers.create_strategy_handler import (
    CreateStrategyHandler,
)
from strategy_gateway.application.commands.handlers.delete_strategy_handler import (
    DeleteStrategyHandler,
)
from strategy_gateway.application.commands.strategy_commands import (
    CreateStrategy,
    DeleteStrategy,
)
from strategy_gateway.application.queries.handlers.get_strategy_handler import (
    GetStrategyHandler,
)
from strategy_gateway.application.queries.handlers.list_strategies_handler import (
    ListStrategiesHandler,
)
from strategy_gateway.application.queries.strategy_queries import (
    GetStrategy,
    ListStrategies,
)
from strategy_gateway.core.container import (
    get_create_strategy_handler,
    get_delete_strategy_handler,
    get_get_strategy_handler,
    get_list_strategies_handler,
)
from strategy_gateway.core.result import Failure, Success
from strategy_gateway.presentation.routers.api.middleware.identity_dependencies import (
    ActingIdentity,
)
from strategy_gateway.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from strategy_gateway.presentation.routers.api.v1.errors import ErrorResponseBuilder
from strategy_gateway.schemas.strategy_schemas import (
    StrategyListResponse,
    StrategyResponse,
)

StrategyNamePath = Annotated[str, Path(description="Strategy name")]


async def list_strategies(
    request: Request,
    handler: ListStrategiesHandler = Depends(get_list_strategies_handler),
) -> StrategyListResponse | Response:
    """List all strategies.

    GET /api/v1/strategies -> 200 OK

    Returns:
        StrategyListResponse with ``version`` and ``strategies``.
        Empty 500 response on projection failure.
    """
    result = await handler.handle(ListStrategies())

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=listing):
            return StrategyListResponse.from_dto(listing)


async def get_strategy(
    request: Request,
    name: StrategyNamePath,
    handler: GetStrategyHandler = Depends(get_get_strategy_handler),
) -> StrategyResponse | Response:
    """Get a strategy by name.

    GET /api/v1/strategies/{name} -> 200 OK

    Args:
        request: FastAPI request object.
        name: Strategy name.
        handler: Get strategy handler (injected).

    Returns:
        StrategyResponse with the full strategy record.
        404 Problem Details when absent, empty 500 on projection failure.
    """
    result = await handler.handle(GetStrategy(name=name))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=strategy):
            return StrategyResponse.from_entity(strategy)


async def create_strategy(
    request: Request,
    payload: Annotated[dict[str, Any], Body(description="Strategy record")],
    identity: ActingIdentity,
    handler: CreateStrategyHandler = Depends(get_create_strategy_handler),
) -> Response:
    """Create a strategy.

    POST /api/v1/strategies -> 201 Created (empty body)

    Args:
        request: FastAPI request object.
        payload: Strategy record (``name`` plus free-form attributes).
        identity: Acting identity recorded on the event.
        handler: Create strategy handler (injected).

    Returns:
        Empty 201 on success. 400 Problem Details with field errors,
        403 Problem Details on a name collision, empty 500 on faults.
    """
    command = CreateStrategy(payload=payload, created_by=identity)
    result = await handler.handle(command)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success():
            return Response(status_code=status.HTTP_201_CREATED)


async def delete_strategy(
    request: Request,
    name: StrategyNamePath,
    identity: ActingIdentity,
    handler: DeleteStrategyHandler = Depends(get_delete_strategy_handler),
) -> Response:
    """Delete a strategy.

    DELETE /api/v1/strategies/{name} -> 200 OK (empty body)

    Args:
        request: FastAPI request object.
        name: Strategy name.
        identity: Acting identity recorded on the event.
        handler: Delete strategy handler (injected).

    Returns:
        Empty 200 on success, empty 404 when absent, empty 500 on faults.
    """
    command = DeleteStrategy(name=name, created_by=identity)
    result = await handler.handle(command)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
                problem_on_not_found=False,
            )
        case Success():
            return Response(status_code=status.HTTP_200_OK)

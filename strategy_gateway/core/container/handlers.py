"""Strategy handler dependency factories.

Request-scoped handler instances (FastAPI ``Depends`` targets). Handlers are
cheap; their ports are app-scoped singletons. Tests replace these through
``app.dependency_overrides``.
"""

from typing import TYPE_CHECKING

from strategy_gateway.core.container.events import get_strategy_projection
from strategy_gateway.core.container.infrastructure import get_logger
from strategy_gateway.core.container.persistence import get_event_store

if TYPE_CHECKING:
    from strategy_gateway.application.commands.handlers.create_strategy_handler import (
        CreateStrategyHandler,
    )
    from strategy_gateway.application.commands.handlers.delete_strategy_handler import (
        DeleteStrategyHandler,
    )
    from strategy_gateway.application.queries.handlers.get_strategy_handler import (
        GetStrategyHandler,
    )
    from strategy_gateway.application.queries.handlers.list_strategies_handler import (
        ListStrategiesHandler,
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


async def get_list_strategies_handler() -> "ListStrategiesHandler":
    """Get ListStrategies query handler (request-scoped)."""
    from strategy_gateway.application.queries.handlers.list_strategies_handler import (
        ListStrategiesHandler,
    )

    return ListStrategiesHandler(
        projection=get_strategy_projection(),
        logger=get_logger(),
    )


async def get_get_strategy_handler() -> "GetStrategyHandler":
    """Get GetStrategy query handler (request-scoped)."""
    from strategy_gateway.application.queries.handlers.get_strategy_handler import (
        GetStrategyHandler,
    )

    return GetStrategyHandler(
        projection=get_strategy_projection(),
        logger=get_logger(),
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


async def get_create_strategy_handler() -> "CreateStrategyHandler":
    """Get CreateStrategy command handler (request-scoped).

    Creates handler with:
    - Strategy projection (app-scoped, read-only use)
    - Event store (app-scoped)
    - Logger (app-scoped)
    """
    from strategy_gateway.application.commands.handlers.create_strategy_handler import (
        CreateStrategyHandler,
    )

    return CreateStrategyHandler(
        projection=get_strategy_projection(),
        event_store=get_event_store(),
        logger=get_logger(),
    )


async def get_delete_strategy_handler() -> "DeleteStrategyHandler":
    """Get DeleteStrategy command handler (request-scoped)."""
    from strategy_gateway.application.commands.handlers.delete_strategy_handler import (
        DeleteStrategyHandler,
    )

    return DeleteStrategyHandler(
        projection=get_strategy_projection(),
        event_store=get_event_store(),
        logger=get_logger(),
    )

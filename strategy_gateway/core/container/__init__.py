"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from strategy_gateway.core.container import get_logger, get_event_store

The container is organized into modules:
- infrastructure: logger, database
- events: event bus (with projector wiring), strategy projection
- persistence: event store
- handlers: strategy command/query handler factories
"""

from strategy_gateway.core.config import get_settings
from strategy_gateway.core.container.events import (
    get_event_bus,
    get_strategy_projection,
)
from strategy_gateway.core.container.handlers import (
    get_create_strategy_handler,
    get_delete_strategy_handler,
    get_get_strategy_handler,
    get_list_strategies_handler,
)
from strategy_gateway.core.container.infrastructure import get_database, get_logger
from strategy_gateway.core.container.persistence import get_event_store

__all__ = [
    "get_create_strategy_handler",
    "get_database",
    "get_delete_strategy_handler",
    "get_event_bus",
    "get_event_store",
    "get_get_strategy_handler",
    "get_list_strategies_handler",
    "get_logger",
    "get_settings",
    "get_strategy_projection",
]

"""Event store and projection factories.

Application-scoped singletons. The backend (in-memory or SQL) is chosen by
``settings.storage_backend``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from strategy_gateway.core.config import get_settings
from strategy_gateway.core.container.events import get_event_bus
from strategy_gateway.core.container.infrastructure import get_database

if TYPE_CHECKING:
    from strategy_gateway.domain.protocols.event_store_protocol import (
        EventStoreProtocol,
    )


@lru_cache()
def get_event_store() -> "EventStoreProtocol":
    """Get the event store singleton (app-scoped).

    The store publishes every appended event on the event bus, which keeps
    the projection up to date through the strategy projector.

    Returns:
        Event store implementing EventStoreProtocol.

    Raises:
        ValueError: If ``storage_backend`` is not supported.
    """
    settings = get_settings()

    if settings.storage_backend == "memory":
        from strategy_gateway.infrastructure.persistence.in_memory import (
            InMemoryEventStore,
        )

        return InMemoryEventStore(event_bus=get_event_bus())
    elif settings.storage_backend == "database":
        from strategy_gateway.infrastructure.persistence.repositories import (
            SqlEventStore,
        )

        return SqlEventStore(database=get_database(), event_bus=get_event_bus())
    else:
        raise ValueError(
            f"Unsupported STORAGE_BACKEND: {settings.storage_backend}. "
            f"Supported: 'memory', 'database'"
        )

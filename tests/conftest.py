"""Pytest configuration and shared fixtures.

Fixtures build fresh in-memory adapters per test so that no state leaks
between tests through the container singletons.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from strategy_gateway.infrastructure.events.in_memory_event_bus import (  # noqa: E402
    InMemoryEventBus,
)
from strategy_gateway.infrastructure.persistence.in_memory import (  # noqa: E402
    InMemoryEventStore,
    InMemoryStrategyProjection,
)
from strategy_gateway.infrastructure.projections.strategy_projector import (  # noqa: E402
    StrategyProjector,
)


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def projection() -> InMemoryStrategyProjection:
    """Empty in-memory strategy projection."""
    return InMemoryStrategyProjection()


@pytest.fixture
def event_bus(projection, mock_logger) -> InMemoryEventBus:
    """Event bus with a strategy projector subscribed on ``projection``."""
    bus = InMemoryEventBus(logger=mock_logger)
    StrategyProjector(projection=projection, logger=mock_logger).register(bus)
    return bus


@pytest.fixture
def event_store(event_bus) -> InMemoryEventStore:
    """In-memory event store publishing to ``event_bus``."""
    return InMemoryEventStore(event_bus=event_bus)


def strategy_payload(name: str = "gradualRollout", **attributes) -> dict:
    """Build a strategy record for tests.

    Args:
        name: Strategy name.
        **attributes: Extra attributes; defaults to a description and one
            parameter template.

    Returns:
        Strategy payload dict.
    """
    if not attributes:
        attributes = {
            "description": "Roll out to a percentage of users",
            "parameters": [
                {
                    "name": "percentage",
                    "type": "percentage",
                    "description": "How many users should see the feature",
                    "required": False,
                }
            ],
        }
    return {"name": name, **attributes}

"""Integration tests for the strategy command/query lifecycle.

Handlers, validator, event store, event bus, projector and projection wired
together in memory, the way the container wires them.
"""

import asyncio

import pytest

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
from strategy_gateway.application.errors import ApplicationErrorCode
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
from strategy_gateway.core.result import Failure, Success
from strategy_gateway.domain.events import StrategyCreated, StrategyDeleted
from tests.conftest import strategy_payload


@pytest.fixture
def handlers(projection, event_store, mock_logger):
    return {
        "create": CreateStrategyHandler(
            projection=projection, event_store=event_store, logger=mock_logger
        ),
        "delete": DeleteStrategyHandler(
            projection=projection, event_store=event_store, logger=mock_logger
        ),
        "get": GetStrategyHandler(projection=projection, logger=mock_logger),
        "list": ListStrategiesHandler(projection=projection, logger=mock_logger),
    }


@pytest.mark.integration
class TestStrategyLifecycle:
    """Create, read, collide, delete."""

    @pytest.mark.asyncio
    async def test_gradual_rollout_lifecycle(self, handlers, event_store):
        payload = strategy_payload("gradualRollout")

        # Create
        created = await handlers["create"].handle(
            CreateStrategy(payload=payload, created_by="alice")
        )
        assert isinstance(created, Success)

        # Read back
        fetched = await handlers["get"].handle(GetStrategy(name="gradualRollout"))
        assert isinstance(fetched, Success)
        assert fetched.value.to_payload() == payload

        listing = await handlers["list"].handle(ListStrategies())
        assert isinstance(listing, Success)
        assert listing.value.version == 1
        assert [s.name for s in listing.value.strategies] == ["gradualRollout"]

        # Second create collides
        duplicate = await handlers["create"].handle(
            CreateStrategy(payload=payload, created_by="bob")
        )
        assert isinstance(duplicate, Failure)
        assert duplicate.error.code == ApplicationErrorCode.NAME_EXISTS

        # Delete
        deleted = await handlers["delete"].handle(
            DeleteStrategy(name="gradualRollout", created_by="alice")
        )
        assert isinstance(deleted, Success)

        gone = await handlers["get"].handle(GetStrategy(name="gradualRollout"))
        assert isinstance(gone, Failure)
        assert gone.error.code == ApplicationErrorCode.NOT_FOUND

        # Second delete is not found and appends nothing
        again = await handlers["delete"].handle(
            DeleteStrategy(name="gradualRollout", created_by="alice")
        )
        assert isinstance(again, Failure)
        assert again.error.code == ApplicationErrorCode.NOT_FOUND

        events = await event_store.list_events()
        assert [type(e) for e in events] == [StrategyCreated, StrategyDeleted]
        assert [e.created_by for e in events] == ["alice", "alice"]

    @pytest.mark.asyncio
    async def test_rejected_create_appends_nothing(self, handlers, event_store):
        result = await handlers["create"].handle(
            CreateStrategy(payload={"name": "bad name"}, created_by="alice")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert await event_store.list_events() == []


@pytest.mark.integration
class TestConcurrentCreates:
    """Concurrent creates for the same new name."""

    @pytest.mark.asyncio
    async def test_concurrent_duplicates_converge_to_one_strategy(
        self, handlers, event_store, projection
    ):
        # Arrange
        commands = [
            CreateStrategy(
                payload=strategy_payload("flexibleRollout", description=who),
                created_by=who,
            )
            for who in ("alice", "bob")
        ]

        # Act
        results = await asyncio.gather(
            *(handlers["create"].handle(cmd) for cmd in commands)
        )

        # Assert
        assert all(isinstance(r, Success) for r in results)
        events = await event_store.list_events()
        assert len(events) == 2
        strategies = await projection.list_all()
        assert len(strategies) == 1
        assert strategies[0].attributes["description"] == events[-1].data["description"]

"""Unit tests for DeleteStrategyHandler.

Tests cover:
- Success: one StrategyDeleted with data {name}
- Absent strategy: NOT_FOUND, nothing appended, nothing logged
- Projection and append faults: COMMAND_EXECUTION_FAILED, logged
"""

from unittest.mock import AsyncMock

import pytest

from strategy_gateway.application.commands.handlers.delete_strategy_handler import (
    DeleteStrategyHandler,
)
from strategy_gateway.application.commands.strategy_commands import DeleteStrategy
from strategy_gateway.application.errors import ApplicationErrorCode
from strategy_gateway.core.errors import NotFoundError
from strategy_gateway.core.result import Failure, Success
from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.domain.events import StrategyDeleted


@pytest.fixture
def mock_projection():
    projection = AsyncMock()
    projection.get_by_name.return_value = Strategy(name="gradualRollout")
    return projection


@pytest.fixture
def mock_event_store():
    return AsyncMock()


@pytest.fixture
def handler(mock_projection, mock_event_store, mock_logger):
    return DeleteStrategyHandler(
        projection=mock_projection,
        event_store=mock_event_store,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestDeleteStrategyHandler:
    """Tests for DeleteStrategyHandler.handle."""

    @pytest.mark.asyncio
    async def test_existing_strategy_appends_deleted_event(
        self, handler, mock_event_store, mock_logger
    ):
        # Arrange
        command = DeleteStrategy(name="gradualRollout", created_by="bob")

        # Act
        result = await handler.handle(command)

        # Assert
        assert isinstance(result, Success)
        mock_event_store.append.assert_awaited_once()
        event = mock_event_store.append.await_args.args[0]
        assert isinstance(event, StrategyDeleted)
        assert event.data == {"name": "gradualRollout"}
        assert event.created_by == "bob"
        mock_logger.info.assert_called_once_with(
            "strategy_deleted",
            strategy_name="gradualRollout",
            created_by="bob",
            event_id=str(event.event_id),
        )

    @pytest.mark.asyncio
    async def test_absent_strategy_is_silent_not_found(
        self, handler, mock_projection, mock_event_store, mock_logger
    ):
        # Arrange
        mock_projection.get_by_name.return_value = None
        command = DeleteStrategy(name="missing", created_by="bob")

        # Act
        result = await handler.handle(command)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert isinstance(result.error.domain_error, NotFoundError)
        assert result.error.domain_error.resource_id == "missing"
        mock_event_store.append.assert_not_called()
        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_not_called()
        mock_logger.info.assert_not_called()

    @pytest.mark.asyncio
    async def test_projection_failure_is_logged_execution_failure(
        self, handler, mock_projection, mock_event_store, mock_logger
    ):
        # Arrange
        error = TimeoutError("projection timed out")
        mock_projection.get_by_name.side_effect = error
        command = DeleteStrategy(name="gradualRollout", created_by="bob")

        # Act
        result = await handler.handle(command)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        mock_event_store.append.assert_not_called()
        mock_logger.error.assert_called_once_with(
            "strategy_delete_failed",
            error=error,
            strategy_name="gradualRollout",
            created_by="bob",
        )

    @pytest.mark.asyncio
    async def test_append_failure_is_logged_execution_failure(
        self, handler, mock_event_store, mock_logger
    ):
        mock_event_store.append.side_effect = RuntimeError("log unavailable")
        command = DeleteStrategy(name="gradualRollout", created_by="bob")

        result = await handler.handle(command)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        assert mock_logger.error.call_args.args == ("strategy_delete_failed",)
        mock_logger.info.assert_not_called()

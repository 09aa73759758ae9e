"""API tests for strategy endpoints.

Tests the complete HTTP request/response cycle for:
- GET /api/v1/strategies
- GET /api/v1/strategies/{name}
- POST /api/v1/strategies
- DELETE /api/v1/strategies/{name}

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Handlers run on fresh in-memory adapters per test
- Tests validation, outcome mapping and identity attribution
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

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
from strategy_gateway.core.container import (
    get_create_strategy_handler,
    get_delete_strategy_handler,
    get_get_strategy_handler,
    get_list_strategies_handler,
)
from strategy_gateway.domain.events import StrategyCreated, StrategyDeleted
from strategy_gateway.main import app
from tests.conftest import strategy_payload

STRATEGIES_URL = "/api/v1/strategies"


def _override_handlers(projection, event_store, logger) -> None:
    app.dependency_overrides[get_list_strategies_handler] = lambda: (
        ListStrategiesHandler(projection=projection, logger=logger)
    )
    app.dependency_overrides[get_get_strategy_handler] = lambda: GetStrategyHandler(
        projection=projection, logger=logger
    )
    app.dependency_overrides[get_create_strategy_handler] = lambda: (
        CreateStrategyHandler(
            projection=projection, event_store=event_store, logger=logger
        )
    )
    app.dependency_overrides[get_delete_strategy_handler] = lambda: (
        DeleteStrategyHandler(
            projection=projection, event_store=event_store, logger=logger
        )
    )


@pytest.fixture
def client(projection, event_store, mock_logger):
    """Test client whose handlers run on the per-test in-memory adapters."""
    _override_handlers(projection, event_store, mock_logger)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(event_store, mock_logger):
    """Test client whose projection raises on every read."""
    projection = MagicMock()
    projection.list_all = AsyncMock(side_effect=ConnectionError("projection down"))
    projection.get_by_name = AsyncMock(
        side_effect=ConnectionError("projection down")
    )
    _override_handlers(projection, event_store, mock_logger)
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# List Strategies
# =============================================================================


@pytest.mark.api
class TestListStrategies:
    """Tests for GET /api/v1/strategies."""

    def test_empty_list(self, client):
        response = client.get(STRATEGIES_URL)

        assert response.status_code == 200
        assert response.json() == {"version": 1, "strategies": []}

    def test_lists_created_strategies_with_attributes(self, client):
        # Arrange
        client.post(STRATEGIES_URL, json=strategy_payload("userWithId"))
        client.post(STRATEGIES_URL, json=strategy_payload("default", description="On"))

        # Act
        response = client.get(STRATEGIES_URL)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["version"] == 1
        assert [s["name"] for s in data["strategies"]] == ["default", "userWithId"]
        assert data["strategies"][0] == {"name": "default", "description": "On"}
        assert data["strategies"][1]["parameters"][0]["name"] == "percentage"

    def test_projection_failure_returns_empty_500(self, failing_client):
        response = failing_client.get(STRATEGIES_URL)

        assert response.status_code == 500
        assert response.content == b""


# =============================================================================
# Get Strategy
# =============================================================================


@pytest.mark.api
class TestGetStrategy:
    """Tests for GET /api/v1/strategies/{name}."""

    def test_returns_full_record(self, client):
        payload = strategy_payload("gradualRollout")
        client.post(STRATEGIES_URL, json=payload)

        response = client.get(f"{STRATEGIES_URL}/gradualRollout")

        assert response.status_code == 200
        assert response.json() == payload

    def test_absent_name_returns_404_problem(self, client):
        response = client.get(f"{STRATEGIES_URL}/missing", headers={"X-Trace-Id": "t-1"})

        assert response.status_code == 404
        data = response.json()
        assert data["title"] == "Resource Not Found"
        assert data["status"] == 404
        assert data["instance"] == f"{STRATEGIES_URL}/missing"
        assert data["trace_id"] == "t-1"

    def test_ill_formed_name_returns_404(self, client):
        response = client.get(f"{STRATEGIES_URL}/bad name")

        assert response.status_code == 404

    def test_projection_failure_returns_empty_500(self, failing_client):
        response = failing_client.get(f"{STRATEGIES_URL}/default")

        assert response.status_code == 500
        assert response.content == b""


# =============================================================================
# Create Strategy
# =============================================================================


@pytest.mark.api
class TestCreateStrategy:
    """Tests for POST /api/v1/strategies."""

    def test_create_returns_201_with_empty_body(self, client, event_store):
        # Act
        response = client.post(STRATEGIES_URL, json=strategy_payload("gradualRollout"))

        # Assert
        assert response.status_code == 201
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_create_appends_one_event(self, client, event_store):
        payload = strategy_payload("gradualRollout")

        client.post(STRATEGIES_URL, json=payload)

        events = await event_store.list_events()
        assert len(events) == 1
        assert isinstance(events[0], StrategyCreated)
        assert events[0].data == payload

    def test_missing_name_returns_400_with_both_violations(self, client):
        # Act
        response = client.post(STRATEGIES_URL, json={"description": "no name"})

        # Assert
        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Validation Failed"
        assert {e["code"] for e in data["errors"]} == {
            "field_required",
            "invalid_format",
        }
        assert all(e["field"] == "name" for e in data["errors"])

    def test_name_with_space_returns_400_format_violation(self, client):
        response = client.post(STRATEGIES_URL, json={"name": "gradual rollout"})

        assert response.status_code == 400
        assert [e["code"] for e in response.json()["errors"]] == ["invalid_format"]

    def test_duplicate_name_returns_403(self, client):
        client.post(STRATEGIES_URL, json=strategy_payload("default"))

        response = client.post(STRATEGIES_URL, json=strategy_payload("default"))

        assert response.status_code == 403
        assert response.json()["title"] == "Name Already Exists"

    @pytest.mark.filterwarnings("error:.*HTTP_422_UNPROCESSABLE_ENTITY")
    def test_non_object_body_returns_422(self, client):
        response = client.post(STRATEGIES_URL, json=["default"])

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Failed"

    def test_event_store_failure_returns_empty_500(self, projection, mock_logger):
        # Arrange
        event_store = MagicMock()
        event_store.append = AsyncMock(side_effect=OSError("disk full"))
        _override_handlers(projection, event_store, mock_logger)

        try:
            # Act
            response = TestClient(app).post(
                STRATEGIES_URL, json=strategy_payload("default")
            )
        finally:
            app.dependency_overrides.clear()

        # Assert
        assert response.status_code == 500
        assert response.content == b""


# =============================================================================
# Delete Strategy
# =============================================================================


@pytest.mark.api
class TestDeleteStrategy:
    """Tests for DELETE /api/v1/strategies/{name}."""

    @pytest.mark.asyncio
    async def test_delete_returns_200_and_removes(self, client, event_store):
        # Arrange
        client.post(STRATEGIES_URL, json=strategy_payload("default"))

        # Act
        response = client.delete(f"{STRATEGIES_URL}/default")

        # Assert
        assert response.status_code == 200
        assert response.content == b""
        assert client.get(f"{STRATEGIES_URL}/default").status_code == 404
        events = await event_store.list_events()
        assert isinstance(events[-1], StrategyDeleted)
        assert events[-1].data == {"name": "default"}

    @pytest.mark.asyncio
    async def test_delete_absent_returns_empty_404(self, client, event_store):
        response = client.delete(f"{STRATEGIES_URL}/missing")

        assert response.status_code == 404
        assert response.content == b""
        assert await event_store.list_events() == []


# =============================================================================
# Identity and Tracing
# =============================================================================


@pytest.mark.api
class TestIdentityAndTracing:
    """Acting identity attribution and trace header echo."""

    @pytest.mark.asyncio
    async def test_identity_from_cookie(self, client, event_store):
        client.cookies.set("username", "alice")

        client.post(STRATEGIES_URL, json=strategy_payload("default"))

        events = await event_store.list_events()
        assert events[0].created_by == "alice"

    @pytest.mark.asyncio
    async def test_identity_from_header(self, client, event_store):
        client.post(
            STRATEGIES_URL,
            json=strategy_payload("default"),
            headers={"X-Username": "bob"},
        )

        events = await event_store.list_events()
        assert events[0].created_by == "bob"

    @pytest.mark.asyncio
    async def test_anonymous_identity(self, client, event_store):
        client.post(STRATEGIES_URL, json=strategy_payload("default"))
        client.delete(f"{STRATEGIES_URL}/default")

        events = await event_store.list_events()
        assert [e.created_by for e in events] == ["unknown", "unknown"]

    def test_trace_id_echoed(self, client):
        response = client.get(STRATEGIES_URL, headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"

    def test_trace_id_generated(self, client):
        response = client.get(STRATEGIES_URL)

        assert response.headers["X-Trace-Id"]

"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the Route Metadata Registry remains the single source of
truth by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Metadata is consistent (unique operation ids, documented faults)
"""

from strategy_gateway.core.config import settings
from strategy_gateway.presentation.routers.api.v1 import v1_router
from strategy_gateway.presentation.routers.api.v1.routes.metadata import (
    HTTPMethod,
    IdempotencyLevel,
)
from strategy_gateway.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_all_routes_are_registered(self):
        actual_routes = {
            f"{method} {route.path}"
            for route in v1_router.routes
            if hasattr(route, "methods")
            for method in route.methods
            if method not in {"HEAD", "OPTIONS"}
        }
        expected_routes = {
            f"{entry.method.value} {settings.api_v1_prefix}{entry.path}"
            for entry in ROUTE_REGISTRY
        }

        assert actual_routes == expected_routes

    def test_operation_ids_are_unique(self):
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert len(operation_ids) == len(set(operation_ids))


class TestRegistryMetadata:
    """Verify metadata consistency."""

    def test_every_route_documents_server_fault(self):
        for entry in ROUTE_REGISTRY:
            assert 500 in {error.status for error in entry.errors}, entry.operation_id

    def test_get_routes_are_safe(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.GET:
                assert entry.idempotency == IdempotencyLevel.SAFE

    def test_status_codes(self):
        status_by_operation = {
            entry.operation_id: entry.status_code for entry in ROUTE_REGISTRY
        }

        assert status_by_operation == {
            "list_strategies": 200,
            "get_strategy": 200,
            "create_strategy": 201,
            "delete_strategy": 200,
        }

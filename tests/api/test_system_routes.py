"""API tests for non-versioned system routes.

Validates behavior of root and health endpoints exposed by the system
router, and Problem Details for unknown routes.
"""

from fastapi.testclient import TestClient

from strategy_gateway.core.config import settings
from strategy_gateway.main import app


client = TestClient(app)


def test_root_endpoint_returns_status_and_version() -> None:
    """Root endpoint should return operational status and app version."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == settings.app_name
    assert data["status"] == "operational"
    assert data["version"] == settings.app_version


def test_health_endpoint_returns_healthy_status() -> None:
    """Health endpoint should return a healthy status indicator."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_unknown_route_returns_problem_details() -> None:
    """Router-level 404 should be rendered as RFC 7807 Problem Details."""
    response = client.get("/api/v1/unknown")

    assert response.status_code == 404
    data = response.json()
    assert data["title"] == "Resource Not Found"
    assert data["type"].endswith("/errors/not-found")


def test_wrong_method_returns_405_problem_details() -> None:
    """Unsupported method on a known path should be 405 Problem Details."""
    response = client.put("/api/v1/strategies")

    assert response.status_code == 405
    assert response.json()["title"] == "Method Not Allowed"


def test_application_mounts_strategy_routes() -> None:
    """The app module should import with every strategy route mounted."""
    paths = {
        (method, route.path)
        for route in app.routes
        for method in getattr(route, "methods", ())
    }

    assert ("GET", f"{settings.api_v1_prefix}/strategies") in paths
    assert ("POST", f"{settings.api_v1_prefix}/strategies") in paths
    assert ("GET", f"{settings.api_v1_prefix}/strategies/{{name}}") in paths
    assert ("DELETE", f"{settings.api_v1_prefix}/strategies/{{name}}") in paths

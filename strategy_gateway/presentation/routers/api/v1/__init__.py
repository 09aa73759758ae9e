"""API v1 routers.

All routes are generated from the route registry at import time. See
routes/registry.py for the route catalog.

Resources:
    /api/v1/strategies          - list, create
    /api/v1/strategies/{name}   - get, delete
"""

from fastapi import APIRouter

from strategy_gateway.core.config import settings
from strategy_gateway.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from strategy_gateway.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]

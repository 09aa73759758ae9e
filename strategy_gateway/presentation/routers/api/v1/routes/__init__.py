"""Route registry, metadata types and generator."""

from strategy_gateway.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from strategy_gateway.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

__all__ = ["ROUTE_REGISTRY", "register_routes_from_registry"]

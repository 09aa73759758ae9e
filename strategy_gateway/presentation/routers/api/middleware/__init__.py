"""Request middleware and per-request dependencies."""

from strategy_gateway.presentation.routers.api.middleware.identity_dependencies import (
    ActingIdentity,
    extract_identity,
)
from strategy_gateway.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["ActingIdentity", "TraceMiddleware", "extract_identity", "get_trace_id"]

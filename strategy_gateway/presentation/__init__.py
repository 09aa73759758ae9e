"""Presentation layer - HTTP surface (FastAPI routers, middleware, RFC 7807 errors)."""

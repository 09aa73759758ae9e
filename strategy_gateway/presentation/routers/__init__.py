"""FastAPI routers.

- system: non-versioned endpoints (root, health)
- api.v1: versioned strategy resource endpoints
"""

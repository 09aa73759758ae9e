"""Test suite for the strategy gateway.

Test structure follows the test pyramid:
- unit/: Unit tests - Test each layer in isolation with mocked ports
- integration/: Integration tests - Real adapters wired together (in-memory, SQLite)
- api/: API endpoint tests - HTTP through FastAPI TestClient
"""

"""Persistence adapters.

- in_memory: process-local event store and projection
- database / base / models / repositories: SQLAlchemy async adapters
"""

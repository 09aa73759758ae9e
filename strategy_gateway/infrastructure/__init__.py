"""Infrastructure layer - Adapters for the domain ports.

Structure:
- events/: In-memory event bus
- logging/: structlog console adapter (LoggerProtocol)
- persistence/: In-memory and SQLAlchemy event stores and projections
- projections/: Projector keeping the strategy projection in sync with events

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

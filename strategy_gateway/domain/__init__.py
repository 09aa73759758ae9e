"""Domain layer - Pure business logic.

Contains the Strategy entity, strategy domain events, the name validators
and the protocols (ports) the application layer depends on. The domain layer
has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (Strategy)
- enums/: Domain enums (EventType)
- events/: Domain events (StrategyCreated, StrategyDeleted)
- protocols/: Ports (projection, event store, event bus, logger)
- validators/: Pure validation functions shared with Pydantic schemas
"""

"""Application layer - Use cases and orchestration.

CQRS split over the strategy registry:
- commands/: CreateStrategy, DeleteStrategy and their handlers (append events)
- queries/: ListStrategies, GetStrategy and their handlers (read projection)
- services/: the create-command validation pipeline
- errors/: ApplicationError, the tagged failure type every handler returns
"""

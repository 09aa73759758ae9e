"""Strategy commands (CQRS write operations).

Commands represent the intent to change the strategy registry. They are
immutable, keyword-only data containers; handlers hold the logic and return
Result types.

The acting identity is carried on the command itself. Handlers never read
request state to find out who is acting.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class CreateStrategy:
    """Create a new strategy.

    Attributes:
        payload: Submitted strategy record. Expected to carry ``name`` plus
            free-form attributes; not yet validated.
        created_by: Acting identity (may be the anonymous sentinel).

    Example:
        >>> command = CreateStrategy(
        ...     payload={"name": "gradualRollout", "description": "By percentage"},
        ...     created_by="alice",
        ... )
        >>> result = await handler.handle(command)
    """

    payload: dict[str, Any]
    created_by: str


@dataclass(frozen=True, kw_only=True)
class DeleteStrategy:
    """Delete an existing strategy.

    Attributes:
        name: Name of the strategy to delete.
        created_by: Acting identity recorded on the StrategyDeleted event.

    Example:
        >>> command = DeleteStrategy(name="gradualRollout", created_by="alice")
        >>> result = await handler.handle(command)
    """

    name: str
    created_by: str

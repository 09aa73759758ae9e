"""Strategy projection protocols.

The projection holds the current-state view of strategies. It is derived
from the event log by a projector and may lag behind events that are still
in flight; readers must not assume it reflects their own latest append.

Two ports:
- StrategyProjectionProtocol: read-only queries used by the gateway.
- StrategyProjectionWriterProtocol: mutations used only by the projector.
"""

from typing import Protocol

from strategy_gateway.domain.entities.strategy import Strategy


class StrategyProjectionProtocol(Protocol):
    """Read-only port over the current strategy projection.

    **Design Principles**:
    - Pure reads: no side effects, idempotent, safe to repeat
    - Not-found is signalled by ``None``, never by raising
    - Raising is reserved for infrastructure failures
    """

    async def list_all(self) -> list[Strategy]:
        """List every strategy in the current snapshot.

        Returns:
            Strategies ordered by name. Empty list when none exist.

        Example:
            >>> strategies = await projection.list_all()
            >>> print(f"Total strategies: {len(strategies)}")
        """
        ...

    async def get_by_name(self, name: str) -> Strategy | None:
        """Find a strategy by its unique name.

        Args:
            name: Strategy name.

        Returns:
            Strategy if present in the snapshot, None otherwise.

        Example:
            >>> strategy = await projection.get_by_name("gradualRollout")
            >>> if strategy is None:
            ...     print("not found")
        """
        ...


class StrategyProjectionWriterProtocol(StrategyProjectionProtocol, Protocol):
    """Projection port with mutations, owned by the projector."""

    async def upsert(self, strategy: Strategy) -> None:
        """Insert a strategy or replace the one with the same name.

        Args:
            strategy: Strategy to store.
        """
        ...

    async def remove(self, name: str) -> None:
        """Remove a strategy by name. Removing an absent name is a no-op.

        Args:
            name: Strategy name.
        """
        ...

    async def clear(self) -> None:
        """Remove every strategy (used before a full replay)."""
        ...

"""Strategy queries (CQRS read operations).

Queries read the strategy projection. They never change state and never
emit domain events.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListStrategies:
    """List every strategy in the current projection."""


@dataclass(frozen=True, kw_only=True)
class GetStrategy:
    """Get a single strategy by name.

    Attributes:
        name: Strategy name to look up.
    """

    name: str

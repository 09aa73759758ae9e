"""Strategy domain entity.

A strategy is a named activation-strategy definition as seen through the
projection. Apart from ``name`` its content is an opaque attribute payload
(description, parameter templates, ...) that the gateway stores and returns
without interpreting.

The gateway never mutates strategies: it reads them for list/get queries
and for the uniqueness check, and records mutations as domain events.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class Strategy:
    """Activation strategy entity (projection view).

    Attributes:
        name: Unique strategy name, matching ``^[0-9a-zA-Z.-]+$``.
        attributes: Free-form descriptive fields, excluding ``name``.

    Example:
        >>> strategy = Strategy.from_payload(
        ...     {"name": "gradualRollout", "description": "Roll out by percentage"}
        ... )
        >>> strategy.to_payload()
        {'name': 'gradualRollout', 'description': 'Roll out by percentage'}
    """

    name: str
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Strategy":
        """Build a strategy from its logical record.

        Args:
            payload: Record containing ``name`` plus free-form attributes.

        Returns:
            Strategy with a private copy of the attributes.
        """
        attributes = {k: deepcopy(v) for k, v in payload.items() if k != "name"}
        return cls(name=payload["name"], attributes=attributes)

    def to_payload(self) -> dict[str, Any]:
        """Render the strategy as its logical record.

        Returns:
            Dict with ``name`` first, followed by the attributes.
        """
        return {"name": self.name, **deepcopy(self.attributes)}

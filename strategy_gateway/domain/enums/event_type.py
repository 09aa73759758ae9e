"""Event type identifiers recorded in the event log.

Values are the wire names stored alongside each event, so they must never
change once events have been written.
"""

from enum import Enum


class EventType(str, Enum):
    """Types of domain events appended to the event log."""

    STRATEGY_CREATED = "strategy-created"
    STRATEGY_DELETED = "strategy-deleted"

"""Domain protocols (ports).

Usage:
    from strategy_gateway.domain.protocols import (
        EventStoreProtocol,
        StrategyProjectionProtocol,
    )
"""

from strategy_gateway.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from strategy_gateway.domain.protocols.event_store_protocol import EventStoreProtocol
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionProtocol,
    StrategyProjectionWriterProtocol,
)

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "EventStoreProtocol",
    "LoggerProtocol",
    "StrategyProjectionProtocol",
    "StrategyProjectionWriterProtocol",
]

"""ListStrategies query handler.

Returns every strategy in the projection together with the schema version of
the list response. An empty projection is a normal, successful result.

Architecture:
- Application layer handler (reads projection only)
- Returns Result[StrategyListResult, ApplicationError]
- NO domain events (queries are side-effect free)
"""

from dataclasses import dataclass, field

from strategy_gateway.application.errors import ApplicationError, ApplicationErrorCode
from strategy_gateway.application.queries.strategy_queries import ListStrategies
from strategy_gateway.core.result import Failure, Result, Success
from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionProtocol,
)

STRATEGY_LIST_VERSION = 1
"""Schema version of the strategy list response body."""


@dataclass(frozen=True, kw_only=True)
class StrategyListResult:
    """Strategy list result DTO.

    Attributes:
        version: Schema version marker (always STRATEGY_LIST_VERSION).
        strategies: Strategies in the current projection snapshot.
    """

    version: int = STRATEGY_LIST_VERSION
    strategies: list[Strategy] = field(default_factory=list)


class ListStrategiesHandler:
    """Handler for ListStrategies query.

    Dependencies (injected via constructor):
        - StrategyProjectionProtocol: For data retrieval
        - LoggerProtocol: For projection failures
    """

    def __init__(
        self,
        projection: StrategyProjectionProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            projection: Read-only strategy projection.
            logger: Structured logger.
        """
        self._projection = projection
        self._logger = logger

    async def handle(
        self, query: ListStrategies
    ) -> Result[StrategyListResult, ApplicationError]:
        """Handle ListStrategies query.

        Args:
            query: ListStrategies query (no parameters).

        Returns:
            Success(StrategyListResult): Possibly empty list.
            Failure(ApplicationError): QUERY_FAILED if the projection raised.
        """
        try:
            strategies = await self._projection.list_all()
        except Exception as e:
            self._logger.error("strategy_list_failed", error=e)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Could not list strategies",
                )
            )

        return Success(value=StrategyListResult(strategies=strategies))

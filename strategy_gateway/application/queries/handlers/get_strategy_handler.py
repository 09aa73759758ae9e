"""GetStrategy query handler.

Looks a strategy up by name in the projection.
"""

from strategy_gateway.application.errors import ApplicationError, ApplicationErrorCode
from strategy_gateway.application.queries.strategy_queries import GetStrategy
from strategy_gateway.core.enums import ErrorCode
from strategy_gateway.core.errors import NotFoundError
from strategy_gateway.core.result import Failure, Result, Success
from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionProtocol,
)


class GetStrategyHandler:
    """Handler for GetStrategy query.

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

    async def handle(self, query: GetStrategy) -> Result[Strategy, ApplicationError]:
        """Handle GetStrategy query.

        Args:
            query: GetStrategy query with the strategy name.

        Returns:
            Success(Strategy): Strategy found.
            Failure(ApplicationError): NOT_FOUND, or QUERY_FAILED if the
                projection raised.
        """
        try:
            strategy = await self._projection.get_by_name(query.name)
        except Exception as e:
            self._logger.error("strategy_get_failed", error=e, strategy_name=query.name)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Could not get strategy",
                    details={"name": query.name},
                )
            )

        if strategy is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="Could not find strategy",
                    domain_error=NotFoundError(
                        code=ErrorCode.STRATEGY_NOT_FOUND,
                        message="Could not find strategy",
                        resource_type="Strategy",
                        resource_id=query.name,
                    ),
                )
            )

        return Success(value=strategy)

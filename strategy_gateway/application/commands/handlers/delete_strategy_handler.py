"""DeleteStrategy command handler.

Confirms the strategy exists in the projection and records its deletion as a
StrategyDeleted event.

A missing strategy is an expected, benign outcome: it is returned as
NOT_FOUND and deliberately NOT logged.
"""

from strategy_gateway.application.commands.strategy_commands import DeleteStrategy
from strategy_gateway.application.errors import ApplicationError, ApplicationErrorCode
from strategy_gateway.core.enums import ErrorCode
from strategy_gateway.core.errors import NotFoundError
from strategy_gateway.core.result import Failure, Result, Success
from strategy_gateway.domain.events.strategy_events import StrategyDeleted
from strategy_gateway.domain.protocols.event_store_protocol import EventStoreProtocol
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionProtocol,
)


class DeleteStrategyHandler:
    """Handler for DeleteStrategy command.

    Dependencies (injected via constructor):
        - StrategyProjectionProtocol: For the existence check
        - EventStoreProtocol: For appending StrategyDeleted
        - LoggerProtocol: For fault and success logging
    """

    def __init__(
        self,
        projection: StrategyProjectionProtocol,
        event_store: EventStoreProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            projection: Read-only strategy projection.
            event_store: Append-only event log.
            logger: Structured logger.
        """
        self._projection = projection
        self._event_store = event_store
        self._logger = logger

    async def handle(self, cmd: DeleteStrategy) -> Result[None, ApplicationError]:
        """Handle DeleteStrategy command.

        Args:
            cmd: DeleteStrategy command with name and acting identity.

        Returns:
            Success(None): StrategyDeleted appended.
            Failure(ApplicationError): NOT_FOUND (not logged) or
                COMMAND_EXECUTION_FAILED (logged).

        Side Effects:
            - Appends one StrategyDeleted event (on success only)
        """
        try:
            existing = await self._projection.get_by_name(cmd.name)
            if existing is None:
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.NOT_FOUND,
                        message="Could not find strategy",
                        domain_error=NotFoundError(
                            code=ErrorCode.STRATEGY_NOT_FOUND,
                            message="Could not find strategy",
                            resource_type="Strategy",
                            resource_id=cmd.name,
                        ),
                    )
                )

            event = StrategyDeleted.for_name(cmd.name, created_by=cmd.created_by)
            await self._event_store.append(event)

        except Exception as e:
            self._logger.error(
                "strategy_delete_failed",
                error=e,
                strategy_name=cmd.name,
                created_by=cmd.created_by,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Could not delete strategy",
                    details={"name": cmd.name},
                )
            )

        self._logger.info(
            "strategy_deleted",
            strategy_name=cmd.name,
            created_by=cmd.created_by,
            event_id=str(event.event_id),
        )
        return Success(value=None)

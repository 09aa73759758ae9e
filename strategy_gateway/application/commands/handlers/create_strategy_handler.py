"""CreateStrategy command handler.

Validates a submitted strategy and records its creation as a StrategyCreated
event. The projection is not touched here; it catches up from the event log.

Flow:
    Received -> Validating (structure) -> Querying (uniqueness)
    -> Emitting (append) -> Completed
    Any stage may end in Failed(code). No stage is retried.

Architecture:
- Application layer handler (orchestrates validation and emission)
- Imports only from domain/core layers and application services
- Returns Result[None, ApplicationError]
"""

from strategy_gateway.application.commands.strategy_commands import CreateStrategy
from strategy_gateway.application.errors import ApplicationError, ApplicationErrorCode
from strategy_gateway.application.services.strategy_validator import (
    StrategyValidator,
)
from strategy_gateway.core.result import Failure, Result, Success
from strategy_gateway.domain.events.strategy_events import StrategyCreated
from strategy_gateway.domain.protocols.event_store_protocol import EventStoreProtocol
from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
from strategy_gateway.domain.protocols.strategy_projection_protocol import (
    StrategyProjectionProtocol,
)


class CreateStrategyHandler:
    """Handler for CreateStrategy command.

    Dependencies (injected via constructor):
        - StrategyProjectionProtocol: For the uniqueness precondition
        - EventStoreProtocol: For appending StrategyCreated
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
        self._validator = StrategyValidator(projection=projection)
        self._event_store = event_store
        self._logger = logger

    async def handle(self, cmd: CreateStrategy) -> Result[None, ApplicationError]:
        """Handle CreateStrategy command.

        Args:
            cmd: CreateStrategy command with payload and acting identity.

        Returns:
            Success(None): StrategyCreated appended.
            Failure(ApplicationError):
                COMMAND_VALIDATION_FAILED, NAME_EXISTS or
                COMMAND_EXECUTION_FAILED (logged).

        Side Effects:
            - Appends one StrategyCreated event (on success only)
        """
        structure = self._validator.validate_structure(cmd.payload)
        if isinstance(structure, Failure):
            return structure
        name = structure.value

        try:
            availability = await self._validator.ensure_name_available(name)
            if isinstance(availability, Failure):
                return availability

            event = StrategyCreated(created_by=cmd.created_by, data=cmd.payload)
            await self._event_store.append(event)

        except Exception as e:
            self._logger.error(
                "strategy_create_failed",
                error=e,
                strategy_name=name,
                created_by=cmd.created_by,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Could not create strategy",
                    details={"name": name},
                )
            )

        self._logger.info(
            "strategy_created",
            strategy_name=name,
            created_by=cmd.created_by,
            event_id=str(event.event_id),
        )
        return Success(value=None)

"""Strategy response schemas.

Create requests are not modelled here: the POST body is taken as a raw JSON
object so that the create validation pipeline reports structural problems
itself (400 with field errors) instead of FastAPI request validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from strategy_gateway.application.queries.handlers.list_strategies_handler import (
    StrategyListResult,
)
from strategy_gateway.domain.entities.strategy import Strategy
from strategy_gateway.domain.types import StrategyName


# =============================================================================
# Response Schemas
# =============================================================================


class StrategyResponse(BaseModel):
    """Single strategy response.

    Only ``name`` is declared; every other attribute of the stored strategy
    is passed through unchanged.
    """

    model_config = ConfigDict(extra="allow")

    name: StrategyName

    @classmethod
    def from_entity(cls, strategy: Strategy) -> "StrategyResponse":
        """Convert a strategy entity to the response schema.

        Args:
            strategy: Strategy from the projection.

        Returns:
            StrategyResponse carrying the full strategy record.
        """
        return cls.model_validate(strategy.to_payload())


class StrategyListResponse(BaseModel):
    """Strategy list response.

    Attributes:
        version: Schema version of this response body.
        strategies: Every strategy in the current projection.
    """

    version: int = Field(..., description="Response schema version", examples=[1])
    strategies: list[StrategyResponse] = Field(..., description="List of strategies")

    @classmethod
    def from_dto(cls, dto: StrategyListResult) -> "StrategyListResponse":
        """Convert application DTO to response schema.

        Args:
            dto: StrategyListResult from handler.

        Returns:
            StrategyListResponse for API response.
        """
        return cls(
            version=dto.version,
            strategies=[StrategyResponse.from_entity(s) for s in dto.strategies],
        )

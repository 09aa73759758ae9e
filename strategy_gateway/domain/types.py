"""Annotated types with centralized validation.

Usage:
    from strategy_gateway.domain.types import StrategyName

    class StrategyResponse(BaseModel):
        name: StrategyName
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from strategy_gateway.domain.validators import validate_strategy_name

StrategyName = Annotated[
    str,
    Field(
        min_length=1,
        description="Unique strategy name",
        examples=["gradualRollout"],
    ),
    AfterValidator(validate_strategy_name),
]
"""Strategy name: one or more ASCII letters, digits, dots or hyphens."""

"""Strategy name validation.

The name pattern is defined once here and reused by the create-command
validation pipeline and by the ``StrategyName`` Annotated type
(domain/types.py) used in the response schemas.
"""

import re

STRATEGY_NAME_PATTERN = re.compile(r"^[0-9a-zA-Z.\-]+$")
"""One or more ASCII letters, digits, dots or hyphens."""

STRATEGY_NAME_REQUIRED_MESSAGE = "Name is required"
STRATEGY_NAME_FORMAT_MESSAGE = r"Name must match format ^[0-9a-zA-Z\.\-]+$"


def validate_strategy_name(v: str) -> str:
    """Validate strategy name format.

    Args:
        v: Strategy name to validate.

    Returns:
        Name unchanged (validation only).

    Raises:
        ValueError: If the name is empty or contains disallowed characters.

    Example:
        >>> validate_strategy_name("gradualRollout")
        'gradualRollout'
        >>> validate_strategy_name("bad name")
        ValueError: Name must match format ^[0-9a-zA-Z\\.\\-]+$
    """
    if not v:
        raise ValueError(STRATEGY_NAME_REQUIRED_MESSAGE)
    if STRATEGY_NAME_PATTERN.fullmatch(v) is None:
        raise ValueError(STRATEGY_NAME_FORMAT_MESSAGE)
    return v

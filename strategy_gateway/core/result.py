"""Result types for railway-oriented programming.

Handlers return Result values instead of raising, so every failure kind is an
explicit branch the presentation layer has to match on.

Usage:
    def parse_name(payload: dict[str, Any]) -> Result[str, str]:
        name = payload.get("name")
        if not name:
            return Failure(error="Name is required")
        return Success(value=name)

    match parse_name({"name": "default"}):
        case Success(value=name):
            print(f"Name: {name}")
        case Failure(error=error):
            print(f"Error: {error}")

Note:
    The dataclasses are keyword-only, so patterns must use keyword
    sub-patterns (``Success(value=v)``), not positional ones.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]

"""Acting identity extraction.

The gateway has no authentication of its own. The acting identity recorded
on events is taken from the request, in order:

1. ``username`` cookie
2. ``X-Username`` header
3. ``settings.anonymous_identity`` (default ``"unknown"``)

The result is always a non-empty string. Route functions pass it into
commands explicitly; handlers never read it from request state.

Usage:
    async def create_strategy(identity: ActingIdentity, ...):
        command = CreateStrategy(payload=payload, created_by=identity)
"""

from typing import Annotated

from fastapi import Depends, Request

from strategy_gateway.core.config import get_settings

IDENTITY_COOKIE = "username"
IDENTITY_HEADER = "X-Username"


def extract_identity(request: Request) -> str:
    """Return the acting identity for a request.

    Blank cookie or header values are ignored.

    Args:
        request: Incoming request.

    Returns:
        Acting identity, or the anonymous sentinel.
    """
    for candidate in (
        request.cookies.get(IDENTITY_COOKIE),
        request.headers.get(IDENTITY_HEADER),
    ):
        if candidate and candidate.strip():
            return candidate.strip()

    return get_settings().anonymous_identity


ActingIdentity = Annotated[str, Depends(extract_identity)]
"""Route parameter type resolving to the acting identity."""

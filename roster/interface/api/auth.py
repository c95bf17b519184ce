"""Caller authentication for API routes."""

import logfire

from roster.domain.error import UnauthorizedError
from roster.domain.service import JWTService
from roster.domain.value import SESSION_TOKEN_HEADER, TokenData
from roster.util.jwt import JWTError


def authenticate(jwt_service: JWTService, session_token: str | None) -> TokenData:
    """Verify the caller's session token.

    Args:
        jwt_service: JWT service
        session_token: Raw header value, if any

    Returns:
        Caller identity

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    if not session_token:
        raise UnauthorizedError("Not authenticated")

    try:
        return jwt_service.verify_token(session_token)
    except JWTError as e:
        logfire.warn("Session token rejected", error=str(e))
        raise UnauthorizedError(str(e)) from e

"""JWT session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from roster.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    is_server: bool = False
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, is_server: bool, expires_in: timedelta, settings: AuthSettings
) -> str:
    """Create a signed session token.

    Args:
        user_id: Subject of the token (service name for server tokens)
        is_server: Whether the token identifies a service
        expires_in: Token lifetime
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    payload = {
        "user_id": user_id,
        "is_server": is_server,
        "exp": datetime.now(timezone.utc) + expires_in,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")

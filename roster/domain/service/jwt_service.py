"""JWT token domain service."""

from datetime import timedelta

import logfire

from roster.config import AuthSettings
from roster.domain.value import TokenData, UserId
from roster.util.jwt import create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_user_token(self, user_id: str) -> str:
        """Create a session token for an end user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        return create_token(
            user_id,
            False,
            timedelta(days=self.auth_settings.user_token_expiry_days),
            self.auth_settings,
        )

    def create_server_token(self) -> str:
        """Create a session token identifying this service.

        Used as the credential for lookups the service performs on its own
        behalf rather than the caller's.

        Returns:
            JWT token string
        """
        return create_token(
            self.auth_settings.server_name,
            True,
            timedelta(minutes=self.auth_settings.server_token_expiry_minutes),
            self.auth_settings,
        )

    def verify_token(self, token: str) -> TokenData:
        """Verify a session token and extract the caller identity.

        Args:
            token: JWT token string

        Returns:
            Caller identity, carrying the raw token for outbound calls

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise

            return TokenData(
                user_id=UserId(payload.user_id),
                is_server=payload.is_server,
                session_token=token,
            )

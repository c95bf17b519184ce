"""Identity service client interface."""

from roster.domain.model import Account


class IdentityClient:
    """Client for the identity service."""

    async def resolve_user(
        self, email_or_id: str, session_token: str
    ) -> Account | None:
        """Resolve an email or user id to an account.

        Args:
            email_or_id: Email address or user id
            session_token: Credential to authenticate the lookup with

        Returns:
            The account if one exists, None otherwise

        Raises:
            ProviderError: If the identity service could not be reached
        """
        raise NotImplementedError

"""Identity service client implementation."""

import httpx
import logfire

from roster.adapter.error import ProviderError
from roster.config import IdentityServiceSettings
from roster.domain.model import Account
from roster.domain.service.identity import IdentityClient
from roster.domain.value import SESSION_TOKEN_HEADER, UserId


class HttpIdentityClient(IdentityClient):
    """Identity service client over HTTP."""

    def __init__(self, settings: IdentityServiceSettings) -> None:
        """Initialize identity client.

        Args:
            settings: Identity service configuration
        """
        self.settings = settings

    async def resolve_user(
        self, email_or_id: str, session_token: str
    ) -> Account | None:
        """Resolve an email or user id via ``GET /user/{emailOrId}``.

        Raises:
            ProviderError: If the lookup failed for any reason other than the
                account not existing
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout_seconds,
            ) as client:
                response = await client.get(
                    f"/user/{email_or_id}",
                    headers={SESSION_TOKEN_HEADER: session_token},
                )
        except httpx.HTTPError as e:
            logfire.error("Identity service HTTP error", error=str(e))
            raise ProviderError(f"HTTP error resolving user: {e}") from e

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            logfire.error(
                "Identity service lookup failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"User lookup failed: {response.status_code}")

        return Account.model_validate(response.json())


class MockIdentityClient(IdentityClient):
    """Mock identity client for testing.

    Resolves accounts registered in memory by id or by any of their emails.
    """

    def __init__(self) -> None:
        """Initialize mock client without accounts."""
        self.accounts: dict[str, Account] = {}
        self.fail = False

    def add_account(
        self, user_id: str, email: str, verified: bool = True
    ) -> Account:
        account = Account(
            user_id=UserId(user_id),
            username=email,
            emails=[email],
            email_verified=verified,
        )
        self.accounts[user_id] = account
        return account

    async def resolve_user(
        self, email_or_id: str, session_token: str
    ) -> Account | None:
        """Return the matching in-memory account."""
        if self.fail:
            raise ProviderError("Mock identity failure")
        if email_or_id in self.accounts:
            return self.accounts[email_or_id]
        for account in self.accounts.values():
            if email_or_id in account.emails:
                return account
        return None

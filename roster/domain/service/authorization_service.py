"""Authorization domain service.

Holds the two authorization rules every invite operation relies on, so they
are applied the same way everywhere:

- Clinic admin: server tokens pass, users need the admin role at the clinic
- Recipient: users only, and only if their verified primary email is the
  invite's email
"""

import logfire

from roster.adapter.error import ProviderError
from roster.domain.error import LookupFailedError, UnauthorizedError
from roster.domain.model import Account, Clinician, Confirmation
from roster.domain.service.clinic import ClinicClient
from roster.domain.service.identity import IdentityClient
from roster.domain.value import ClinicId, TokenData, UserId

from .base import Service


class AuthorizationService(Service):
    """Domain service deciding whether a caller may act on an invite."""

    def __init__(
        self,
        clinic_client: ClinicClient,
        identity_client: IdentityClient,
        admin_role: str = "CLINIC_ADMIN",
    ) -> None:
        """Initialize authorization service.

        Args:
            clinic_client: Clinic service client
            identity_client: Identity service client
            admin_role: Clinician role that grants invite management
        """
        self.clinic_client = clinic_client
        self.identity_client = identity_client
        self.admin_role = admin_role

    async def assert_clinic_admin(self, clinic_id: ClinicId, token: TokenData) -> None:
        """Require the caller to administer the clinic.

        Args:
            clinic_id: Clinic being managed
            token: Caller identity

        Raises:
            LookupFailedError: If the clinician record could not be fetched
            UnauthorizedError: If the caller is not an admin of the clinic
        """
        if token.is_server:
            return

        with logfire.span(
            "authorization_service.assert_clinic_admin",
            clinic_id=clinic_id,
            user_id=token.user_id,
        ):
            try:
                response = await self.clinic_client.get_clinician(
                    clinic_id, token.user_id, token.session_token
                )
            except ProviderError as e:
                logfire.error(
                    "Clinician lookup failed",
                    clinic_id=clinic_id,
                    user_id=token.user_id,
                    error=str(e),
                )
                raise LookupFailedError(str(e)) from e

            if response.status_code >= 500:
                logfire.error(
                    "Clinician lookup failed",
                    clinic_id=clinic_id,
                    user_id=token.user_id,
                    status_code=response.status_code,
                )
                raise LookupFailedError(
                    f"Clinic service responded with status {response.status_code}"
                )

            if not response.ok:
                logfire.warn(
                    "Caller is not a clinician of the clinic",
                    clinic_id=clinic_id,
                    user_id=token.user_id,
                    status_code=response.status_code,
                )
                raise UnauthorizedError()

            clinician = response.parse(Clinician)
            if not clinician.has_role(self.admin_role):
                logfire.warn(
                    "Clinician lacks admin role",
                    clinic_id=clinic_id,
                    user_id=token.user_id,
                    roles=clinician.roles,
                )
                raise UnauthorizedError()

    async def assert_recipient_authorized(
        self, token: TokenData, confirmation: Confirmation | None
    ) -> Account:
        """Require the caller to be the invite's recipient.

        Server tokens are rejected so services cannot act on behalf of users.
        The caller's primary email must be verified and equal the invite email.

        Args:
            token: Caller identity
            confirmation: Invite being acted on

        Returns:
            The caller's account

        Raises:
            UnauthorizedError: If the caller is not the recipient
        """
        if token.is_server:
            logfire.warn("Server token used for recipient action")
            raise UnauthorizedError()

        with logfire.span(
            "authorization_service.assert_recipient_authorized",
            user_id=token.user_id,
        ):
            account = await self.find_account(token.user_id, token.session_token)
            if (
                account is None
                or confirmation is None
                or not account.email_verified
                or account.primary_email != confirmation.email
            ):
                logfire.warn(
                    "Caller is not the invite recipient",
                    user_id=token.user_id,
                    key=confirmation.key if confirmation else None,
                )
                raise UnauthorizedError()
            return account

    async def resolve_self(self, user_id: UserId, token: TokenData) -> Account:
        """Require the caller to be acting on their own account.

        Args:
            user_id: User id taken from the request path
            token: Caller identity

        Returns:
            The caller's account

        Raises:
            UnauthorizedError: If the path id is not the caller, or the caller
                has no account
        """
        if token.is_server or user_id != token.user_id:
            logfire.warn(
                "Caller is not the requested user",
                user_id=user_id,
                caller_id=token.user_id,
                is_server=token.is_server,
            )
            raise UnauthorizedError()

        account = await self.find_account(token.user_id, token.session_token)
        if account is None or account.primary_email is None:
            raise UnauthorizedError()
        return account

    async def find_account(
        self, email_or_id: str, session_token: str
    ) -> Account | None:
        """Resolve an account, treating lookup failures as absent.

        Args:
            email_or_id: Email address or user id
            session_token: Credential for the identity service

        Returns:
            The account if it could be resolved, None otherwise
        """
        try:
            return await self.identity_client.resolve_user(email_or_id, session_token)
        except ProviderError as e:
            logfire.error("Account lookup failed", error=str(e))
            return None

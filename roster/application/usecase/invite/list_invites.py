"""List pending clinician invites use case."""

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.common import ConfirmationItem
from roster.domain.service import AuthorizationService, ConfirmationService
from roster.domain.value import TokenData, UserId


class ListInvitesRequest(BaseModel):
    """List invites request."""

    user_id: UserId  # From the request path
    token: TokenData


class ListInvitesUseCase(BaseUseCase):
    """Use case for listing the invites still pending for the caller."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
    ) -> None:
        """Initialize list invites use case.

        Args:
            authorization_service: Authorization domain service
            confirmation_service: Confirmation domain service
        """
        self.authorization_service = authorization_service
        self.confirmation_service = confirmation_service

    async def execute(self, request: ListInvitesRequest) -> list[ConfirmationItem]:
        """Execute list invites flow.

        Args:
            request: List invites request

        Returns:
            Pending invites addressed to the caller's primary email, in store
            order, each with its key echoed as ``id``

        Raises:
            UnauthorizedError: If the caller is not the requested user
        """
        with logfire.span("get_clinician_invitations", user_id=request.user_id):
            account = await self.authorization_service.resolve_self(
                request.user_id, request.token
            )
            invites = await self.confirmation_service.list_pending_for_email(
                account.primary_email or ""
            )
            logfire.info(
                "Clinician invitations found",
                user_id=request.user_id,
                count=len(invites),
            )
            return [
                ConfirmationItem.from_confirmation(invite, echo_id=True)
                for invite in invites
            ]

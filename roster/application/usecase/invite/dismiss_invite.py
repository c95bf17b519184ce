"""Dismiss clinician invite use case."""

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.common import (
    ConfirmationItem,
    cancel_with_status,
)
from roster.domain.service import AuthorizationService, ClinicClient, ConfirmationService
from roster.domain.value import ConfirmationKey, ConfirmationStatus, TokenData, UserId


class DismissInviteRequest(BaseModel):
    """Dismiss invite request."""

    user_id: UserId  # From the request path; lookups and checks use the token
    invite_id: ConfirmationKey
    token: TokenData


class DismissInviteUseCase(BaseUseCase):
    """Use case for a recipient declining a clinician invite."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        clinic_client: ClinicClient,
    ) -> None:
        """Initialize use case.

        Args:
            authorization_service: Authorization domain service
            confirmation_service: Confirmation domain service
            clinic_client: Clinic service client
        """
        self.authorization_service = authorization_service
        self.confirmation_service = confirmation_service
        self.clinic_client = clinic_client

    async def execute(self, request: DismissInviteRequest) -> ConfirmationItem:
        """Execute dismiss invite use case.

        Raises:
            NotFoundError: If no pending invite matches
            UnauthorizedError: If the caller is not the invite's recipient
            UpstreamFailureError: If the remote invite could not be deleted
            PersistenceError: If the confirmation could not be saved
        """
        with logfire.span(
            "dismiss_clinician_invite",
            key=request.invite_id,
            caller_id=request.token.user_id,
        ):
            confirmation = await self.confirmation_service.get_pending(request.invite_id)
            await self.authorization_service.assert_recipient_authorized(
                request.token, confirmation
            )

            declined = await cancel_with_status(
                self.clinic_client,
                self.confirmation_service,
                confirmation,
                ConfirmationStatus.DECLINED,
                request.token,
                "dismiss_clinician_invite",
            )
            return ConfirmationItem.from_confirmation(declined)

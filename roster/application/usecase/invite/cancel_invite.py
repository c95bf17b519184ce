"""Cancel clinician invite use case."""

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.common import (
    ConfirmationItem,
    cancel_with_status,
)
from roster.domain.service import AuthorizationService, ClinicClient, ConfirmationService
from roster.domain.value import ClinicId, ConfirmationKey, ConfirmationStatus, TokenData


class CancelInviteRequest(BaseModel):
    """Cancel invite request."""

    clinic_id: ClinicId
    invite_id: ConfirmationKey
    token: TokenData


class CancelInviteUseCase(BaseUseCase):
    """Use case for a clinic admin revoking a clinician invite."""

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

    async def execute(self, request: CancelInviteRequest) -> ConfirmationItem:
        """Execute cancel invite use case.

        Raises:
            UnauthorizedError: If the caller is not a clinic admin
            LookupFailedError: If the caller's clinician record could not be fetched
            NotFoundError: If the clinic has no such pending invite
            UpstreamFailureError: If the remote invite could not be deleted
            PersistenceError: If the confirmation could not be saved
        """
        with logfire.span(
            "cancel_clinician_invite",
            clinic_id=request.clinic_id,
            key=request.invite_id,
            caller_id=request.token.user_id,
        ):
            await self.authorization_service.assert_clinic_admin(
                request.clinic_id, request.token
            )
            confirmation = await self.confirmation_service.get_pending(
                request.invite_id, clinic_id=request.clinic_id
            )

            canceled = await cancel_with_status(
                self.clinic_client,
                self.confirmation_service,
                confirmation,
                ConfirmationStatus.CANCELED,
                request.token,
                "cancel_clinician_invite",
            )
            return ConfirmationItem.from_confirmation(canceled)

"""Send clinician invite use case."""

import logfire
from pydantic import BaseModel, EmailStr, Field

from roster.adapter.error import ProviderError
from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.common import (
    ConfirmationItem,
    fetch_clinic,
    persist_and_notify,
)
from roster.domain.error import FindingClinicFailedError, UpstreamRelayError
from roster.domain.model import Creator
from roster.domain.service import (
    AuthorizationService,
    ClinicClient,
    ConfirmationService,
    JWTService,
    NotificationService,
)
from roster.domain.value import ClinicId, TokenData


class SendInviteRequest(BaseModel):
    """Request to invite someone to a clinic's staff."""

    clinic_id: ClinicId
    email: EmailStr
    roles: list[str] = Field(min_length=1)
    token: TokenData


class SendInviteUseCase(BaseUseCase):
    """Use case for sending a new clinician invite.

    The remote invite is created before anything is stored locally: if the
    clinic service refuses it, no confirmation exists.
    """

    def __init__(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        notification_service: NotificationService,
        clinic_client: ClinicClient,
        jwt_service: JWTService,
    ) -> None:
        """Initialize use case.

        Args:
            authorization_service: Authorization domain service
            confirmation_service: Confirmation domain service
            notification_service: Notification domain service
            clinic_client: Clinic service client
            jwt_service: Mints the server credential for account lookups
        """
        self.authorization_service = authorization_service
        self.confirmation_service = confirmation_service
        self.notification_service = notification_service
        self.clinic_client = clinic_client
        self.jwt_service = jwt_service

    async def execute(self, request: SendInviteRequest) -> ConfirmationItem:
        """Execute send invite use case.

        Args:
            request: Send invite request

        Returns:
            The pending confirmation

        Raises:
            UnauthorizedError: If the caller is not a clinic admin
            LookupFailedError: If the caller's clinician record could not be fetched
            FindingClinicFailedError: If the clinic service could not be reached
            UpstreamRelayError: If the clinic service refused the invite
            PersistenceError: If the confirmation could not be saved
        """
        token = request.token
        clinic_id = request.clinic_id

        with logfire.span(
            "send_clinician_invite", clinic_id=clinic_id, caller_id=token.user_id
        ):
            await self.authorization_service.assert_clinic_admin(clinic_id, token)
            clinic = await fetch_clinic(self.clinic_client, clinic_id, token)

            confirmation = self.confirmation_service.new_clinician_invite(token.user_id)
            invited = await self.authorization_service.find_account(
                request.email, self.jwt_service.create_server_token()
            )
            confirmation = confirmation.refreshed(
                email=request.email,
                clinic_id=clinic.id,
                user_id=invited.user_id if invited else None,
                creator=Creator(clinic_id=clinic.id, clinic_name=clinic.name),
            )

            try:
                response = await self.clinic_client.create_clinician_invite(
                    clinic_id,
                    confirmation.key,
                    request.email,
                    request.roles,
                    token.session_token,
                )
            except ProviderError as e:
                logfire.error(
                    "Creating clinician invite failed",
                    key=confirmation.key,
                    error=str(e),
                )
                raise FindingClinicFailedError(str(e)) from e

            if not response.ok:
                logfire.warn(
                    "Clinic service refused clinician invite",
                    key=confirmation.key,
                    status_code=response.status_code,
                )
                raise UpstreamRelayError(response.status_code, response.body)

            saved = await persist_and_notify(
                self.confirmation_service,
                self.notification_service,
                confirmation,
                "send_clinician_invite",
            )
            return ConfirmationItem.from_confirmation(saved)

"""Accept clinician invite use case."""

import logfire
from pydantic import BaseModel

from roster.adapter.error import ProviderError
from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.common import ConfirmationItem
from roster.domain.error import UpstreamFailureError
from roster.domain.service import AuthorizationService, ClinicClient, ConfirmationService
from roster.domain.value import ConfirmationKey, ConfirmationStatus, TokenData, UserId


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    user_id: UserId  # From the request path; lookups and checks use the token
    invite_id: ConfirmationKey
    token: TokenData


class AcceptInviteResponse(BaseModel):
    """Accept invite response."""

    confirmation: ConfirmationItem
    clinician_body: bytes  # Clinic service's association response, relayed as-is


class AcceptInviteUseCase(BaseUseCase):
    """Use case for a recipient accepting a clinician invite.

    The clinic membership is created for the caller's own account, never for
    the user id in the request path, and is linked to the completed record.
    """

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

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Execute accept invite use case.

        Args:
            request: Accept invite request

        Returns:
            Completed confirmation and the clinic service's response body

        Raises:
            NotFoundError: If no pending invite matches
            UnauthorizedError: If the caller is not the invite's recipient
            UpstreamFailureError: If the clinic membership could not be created
            PersistenceError: If the confirmation could not be saved after the
                membership was created
        """
        token = request.token

        with logfire.span(
            "accept_clinician_invite", key=request.invite_id, caller_id=token.user_id
        ):
            confirmation = await self.confirmation_service.get_pending(request.invite_id)
            await self.authorization_service.assert_recipient_authorized(
                token, confirmation
            )

            try:
                response = await self.clinic_client.associate_clinician_to_user(
                    confirmation.clinic_id,
                    request.invite_id,
                    token.user_id,
                    token.session_token,
                )
            except ProviderError as e:
                logfire.error(
                    "Associating clinician failed", key=request.invite_id, error=str(e)
                )
                raise UpstreamFailureError("ERR_ASSOCIATING_CLINICIAN", str(e)) from e

            if not response.ok:
                logfire.error(
                    "Associating clinician failed",
                    key=request.invite_id,
                    status_code=response.status_code,
                )
                raise UpstreamFailureError(
                    "ERR_ASSOCIATING_CLINICIAN",
                    f"Clinic service responded with status {response.status_code}",
                )

            completed = await self.confirmation_service.transition(
                confirmation.refreshed(user_id=token.user_id),
                ConfirmationStatus.COMPLETED,
                "accept_clinician_invite",
            )
            logfire.info("Clinician invite accepted", key=completed.key)
            return AcceptInviteResponse(
                confirmation=ConfirmationItem.from_confirmation(completed),
                clinician_body=response.body,
            )

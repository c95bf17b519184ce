"""Resend clinician invite use case."""

import logfire
from pydantic import BaseModel

from roster.adapter.error import ProviderError
from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.common import (
    ConfirmationItem,
    fetch_clinic,
    persist_and_notify,
)
from roster.domain.error import (
    FindingClinicFailedError,
    InvalidStatusTransitionError,
    UpstreamRelayError,
)
from roster.domain.model import Clinician, Creator
from roster.domain.service import (
    AuthorizationService,
    ClinicClient,
    ConfirmationService,
    JWTService,
    NotificationService,
)
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    TokenData,
)


class ResendInviteRequest(BaseModel):
    """Request to resend a pending clinician invite."""

    clinic_id: ClinicId
    invite_id: ConfirmationKey
    token: TokenData


class ResendInviteUseCase(BaseUseCase):
    """Use case for resending a clinician invite.

    The clinic service's pending invite is authoritative. When the local
    confirmation is missing it is rebuilt under the remote invite id, without
    creating the remote invite again. An invite that was already closed
    locally is never reopened.
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

    async def execute(self, request: ResendInviteRequest) -> ConfirmationItem:
        """Execute resend invite use case.

        Args:
            request: Resend invite request

        Returns:
            The refreshed pending confirmation

        Raises:
            UnauthorizedError: If the caller is not a clinic admin
            LookupFailedError: If the caller's clinician record could not be fetched
            FindingClinicFailedError: If the clinic service could not be reached
            UpstreamRelayError: If the remote invite could not be fetched
            ImmutableFieldError: If the remote invite disagrees with the local one
            InvalidStatusTransitionError: If the invite was already accepted,
                declined or canceled
            PersistenceError: If the confirmation could not be saved
        """
        token = request.token
        clinic_id = request.clinic_id
        invite_id = request.invite_id

        with logfire.span(
            "resend_clinician_invite",
            clinic_id=clinic_id,
            key=invite_id,
            caller_id=token.user_id,
        ):
            await self.authorization_service.assert_clinic_admin(clinic_id, token)
            clinic = await fetch_clinic(self.clinic_client, clinic_id, token)

            try:
                response = await self.clinic_client.get_invited_clinician(
                    clinic_id, invite_id, token.session_token
                )
            except ProviderError as e:
                logfire.error(
                    "Fetching clinician invite failed", key=invite_id, error=str(e)
                )
                raise FindingClinicFailedError(str(e)) from e

            if not response.ok or not response.body:
                logfire.warn(
                    "Clinician invite not available",
                    key=invite_id,
                    status_code=response.status_code,
                )
                raise UpstreamRelayError(response.status_code, response.body)
            invite = response.parse(Clinician)

            confirmation = await self.confirmation_service.find_pending(invite_id)
            if confirmation is None:
                closed = await self.confirmation_service.find_by_key(invite_id)
                if closed is not None:
                    logfire.warn(
                        "Invite is already closed",
                        key=invite_id,
                        status=closed.status.value,
                    )
                    raise InvalidStatusTransitionError(
                        invite_id, closed.status.value, ConfirmationStatus.PENDING.value
                    )
                logfire.info("Rebuilding missing local invite", key=invite_id)
                confirmation = self.confirmation_service.new_clinician_invite(
                    token.user_id, key=invite_id
                )

            invited = None
            if invite.email:
                invited = await self.authorization_service.find_account(
                    invite.email, self.jwt_service.create_server_token()
                )
            confirmation = confirmation.refreshed(
                email=invite.email,
                clinic_id=clinic.id,
                user_id=invited.user_id if invited else None,
                creator=Creator(clinic_id=clinic.id, clinic_name=clinic.name),
            )

            saved = await persist_and_notify(
                self.confirmation_service,
                self.notification_service,
                confirmation,
                "resend_clinician_invite",
            )
            return ConfirmationItem.from_confirmation(saved)

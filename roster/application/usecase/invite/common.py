"""Steps shared by the clinician invite use cases."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from roster.adapter.error import ProviderError
from roster.domain.error import (
    FindingClinicFailedError,
    UpstreamFailureError,
)
from roster.domain.model import Clinic, Confirmation
from roster.domain.service import (
    ClinicClient,
    ConfirmationService,
    NotificationService,
)
from roster.domain.value import ClinicId, ConfirmationStatus, ConfirmationType, TokenData


class CreatorItem(BaseModel):
    """Invite creator snapshot in responses."""

    clinic_id: str | None = None
    clinic_name: str | None = None
    full_name: str | None = None


class ConfirmationItem(BaseModel):
    """Confirmation in responses."""

    id: str | None = None  # Echo of key, set on listings
    key: str
    type: ConfirmationType
    status: ConfirmationStatus
    email: str
    user_id: str | None = None
    clinic_id: str | None = None
    creator_id: str | None = None
    creator: CreatorItem
    created: datetime
    modified: datetime | None = None

    @classmethod
    def from_confirmation(
        cls, confirmation: Confirmation, echo_id: bool = False
    ) -> "ConfirmationItem":
        creator = confirmation.creator
        return cls(
            id=confirmation.key if echo_id else None,
            key=confirmation.key,
            type=confirmation.type,
            status=confirmation.status,
            email=confirmation.email,
            user_id=confirmation.user_id,
            clinic_id=confirmation.clinic_id,
            creator_id=confirmation.creator_id,
            creator=CreatorItem(
                clinic_id=creator.clinic_id,
                clinic_name=creator.clinic_name,
                full_name=creator.profile.full_name if creator.profile else None,
            ),
            created=confirmation.created,
            modified=confirmation.modified,
        )


async def fetch_clinic(
    clinic_client: ClinicClient, clinic_id: ClinicId, token: TokenData
) -> Clinic:
    """Fetch the clinic an invite is scoped to.

    Raises:
        FindingClinicFailedError: If the clinic could not be fetched
    """
    try:
        response = await clinic_client.get_clinic(clinic_id, token.session_token)
    except ProviderError as e:
        raise FindingClinicFailedError(str(e)) from e

    if not response.ok:
        logfire.warn(
            "Clinic lookup failed", clinic_id=clinic_id, status_code=response.status_code
        )
        raise FindingClinicFailedError(f"Clinic {clinic_id} could not be fetched")
    return response.parse(Clinic)


async def persist_and_notify(
    confirmation_service: ConfirmationService,
    notification_service: NotificationService,
    confirmation: Confirmation,
    operation: str,
) -> Confirmation:
    """Save a pending invite with its creator profile, then send its notification.

    Notification failures are swallowed by the notification service; the
    saved invite can always be resent.

    Raises:
        InvalidStatusTransitionError: If the stored invite is already closed
        PersistenceError: If the confirmation could not be saved
    """
    confirmation = await notification_service.attach_profile(confirmation)
    saved = await confirmation_service.save(confirmation, operation)
    logfire.info("Clinician invite created", operation=operation, key=saved.key)
    return await notification_service.deliver(saved)


async def cancel_with_status(
    clinic_client: ClinicClient,
    confirmation_service: ConfirmationService,
    confirmation: Confirmation,
    status: ConfirmationStatus,
    token: TokenData,
    operation: str,
) -> Confirmation:
    """Delete the remote pending invite, then record the local outcome.

    A remote 404 counts as success since the invite is already gone.

    Raises:
        UpstreamFailureError: If the remote delete failed; local state is unchanged
        PersistenceError: If the local update failed after the remote delete
    """
    with logfire.span(
        "cancel_with_status",
        operation=operation,
        key=confirmation.key,
        status=status.value,
    ):
        try:
            response = await clinic_client.delete_invited_clinician(
                confirmation.clinic_id, confirmation.key, token.session_token
            )
        except ProviderError as e:
            logfire.error(
                "Deleting clinician invite failed",
                operation=operation,
                key=confirmation.key,
                error=str(e),
            )
            raise UpstreamFailureError(
                "ERR_CANCELING_CLINICIAN_INVITE", str(e)
            ) from e

        if response.status_code not in (200, 404):
            logfire.error(
                "Deleting clinician invite failed",
                operation=operation,
                key=confirmation.key,
                status_code=response.status_code,
            )
            raise UpstreamFailureError(
                "ERR_CANCELING_CLINICIAN_INVITE",
                f"Clinic service responded with status {response.status_code}",
            )

        return await confirmation_service.transition(confirmation, status, operation)

"""Confirmation entity.

A confirmation is the locally owned record of an invite. The store is shared
by several invite flows, so the record is a variant tagged by ``type``; the
clinic-scoped fields are only populated for clinician invites.
"""

import secrets
from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from roster.domain.error import ImmutableFieldError, InvalidStatusTransitionError
from roster.domain.model.common import DomainModel
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    ConfirmationType,
    TemplateName,
    UserId,
)

KEY_LENGTH = 24


def generate_key() -> ConfirmationKey:
    """Generate a new URL-safe confirmation key."""
    return ConfirmationKey(secrets.token_urlsafe(KEY_LENGTH))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Profile(DomainModel):
    """Display profile of the user who created an invite."""

    full_name: str = ""


class Creator(DomainModel):
    """Snapshot of who sent the invite, taken at send/resend time.

    Kept on the confirmation so notification content stays stable even if the
    clinic is renamed later.
    """

    clinic_id: Optional[ClinicId] = None
    clinic_name: Optional[str] = None
    profile: Optional[Profile] = None


class Confirmation(DomainModel):
    """Confirmation entity.

    Business rules:
    - Status only moves forward: pending -> completed | declined | canceled
    - Email and clinic id never change once set
    - User id may be populated later but is never cleared
    """

    key: ConfirmationKey
    type: ConfirmationType
    status: ConfirmationStatus = ConfirmationStatus.PENDING
    email: str = ""
    user_id: Optional[UserId] = None
    clinic_id: Optional[ClinicId] = None
    creator_id: Optional[UserId] = None
    creator: Creator = Field(default_factory=Creator)
    template_name: TemplateName
    created: datetime = Field(default_factory=utcnow)
    modified: Optional[datetime] = None

    @classmethod
    def new(
        cls,
        type: ConfirmationType,
        template_name: TemplateName,
        creator_id: UserId,
        key: ConfirmationKey | None = None,
    ) -> "Confirmation":
        """Create a pending confirmation with a fresh key unless one is given."""
        return cls(
            key=key or generate_key(),
            type=type,
            status=ConfirmationStatus.PENDING,
            creator_id=creator_id,
            template_name=template_name,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == ConfirmationStatus.PENDING

    def with_status(self, status: ConfirmationStatus) -> "Confirmation":
        """Return a copy moved to ``status``.

        Raises:
            InvalidStatusTransitionError: If the confirmation is not pending,
                or ``status`` is pending
        """
        if not self.is_pending or not status.is_terminal:
            raise InvalidStatusTransitionError(
                self.key, self.status.value, status.value
            )
        return self.model_copy(update={"status": status, "modified": utcnow()})

    def refreshed(
        self,
        *,
        email: str | None = None,
        clinic_id: ClinicId | None = None,
        user_id: UserId | None = None,
        creator: Creator | None = None,
    ) -> "Confirmation":
        """Return a copy with recipient and creator details refreshed.

        Arguments left as None keep the current value.

        Raises:
            ImmutableFieldError: If email or clinic id would change once set
        """
        if email and self.email and email != self.email:
            raise ImmutableFieldError(self.key, "email")
        if clinic_id and self.clinic_id and clinic_id != self.clinic_id:
            raise ImmutableFieldError(self.key, "clinic_id")

        update: dict = {"modified": utcnow()}
        if email:
            update["email"] = email
        if clinic_id:
            update["clinic_id"] = clinic_id
        if user_id:
            update["user_id"] = user_id
        if creator is not None:
            update["creator"] = creator
        return self.model_copy(update=update)

    def with_profile(self, profile: Profile) -> "Confirmation":
        """Return a copy with the creator profile attached."""
        creator = self.creator.model_copy(update={"profile": profile})
        return self.model_copy(update={"creator": creator})

"""Confirmation domain service."""

import logfire

from roster.domain.error import (
    ConfirmationConflictError,
    NotFoundError,
    PersistenceError,
)
from roster.domain.model import Confirmation
from roster.domain.repository import ConfirmationFilter, ConfirmationRepository
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    ConfirmationType,
    TemplateName,
    UserId,
)

from .base import Service


class ConfirmationService(Service):
    """Domain service for clinician invite confirmations."""

    def __init__(self, confirmation_repository: ConfirmationRepository) -> None:
        """Initialize confirmation service.

        Args:
            confirmation_repository: Confirmation repository
        """
        self.confirmation_repository = confirmation_repository

    def new_clinician_invite(
        self, creator_id: UserId, key: ConfirmationKey | None = None
    ) -> Confirmation:
        """Build an unsaved pending clinician invite.

        Args:
            creator_id: User sending the invite
            key: Existing invite id to reuse, or None for a fresh key

        Returns:
            New pending confirmation
        """
        return Confirmation.new(
            ConfirmationType.CLINICIAN_INVITE,
            TemplateName.CLINICIAN_INVITE,
            creator_id,
            key=key,
        )

    async def find_pending(
        self,
        key: ConfirmationKey,
        user_id: UserId | None = None,
        clinic_id: ClinicId | None = None,
    ) -> Confirmation | None:
        """Find a pending clinician invite by key.

        Args:
            key: Invite key
            user_id: Optional recipient constraint
            clinic_id: Optional clinic constraint

        Returns:
            The pending confirmation if found, None otherwise
        """
        with logfire.span(
            "confirmation_service.find_pending",
            key=key,
            user_id=user_id,
            clinic_id=clinic_id,
        ):
            return await self.confirmation_repository.find_one(
                ConfirmationFilter(
                    type=ConfirmationType.CLINICIAN_INVITE,
                    key=key,
                    user_id=user_id,
                    clinic_id=clinic_id,
                    status=ConfirmationStatus.PENDING,
                )
            )

    async def find_by_key(self, key: ConfirmationKey) -> Confirmation | None:
        """Find a clinician invite by key in any status.

        Args:
            key: Invite key

        Returns:
            The confirmation if found, None otherwise
        """
        with logfire.span("confirmation_service.find_by_key", key=key):
            return await self.confirmation_repository.find_one(
                ConfirmationFilter(type=ConfirmationType.CLINICIAN_INVITE, key=key)
            )

    async def get_pending(
        self,
        key: ConfirmationKey,
        user_id: UserId | None = None,
        clinic_id: ClinicId | None = None,
    ) -> Confirmation:
        """Get a pending clinician invite by key.

        Raises:
            NotFoundError: If no pending invite matches
        """
        confirmation = await self.find_pending(key, user_id=user_id, clinic_id=clinic_id)
        if confirmation is None:
            logfire.warn("Pending invite not found", key=key)
            raise NotFoundError("Invite", key)
        return confirmation

    async def list_pending_for_email(self, email: str) -> list[Confirmation]:
        """List pending clinician invites addressed to an email.

        Args:
            email: Recipient email

        Returns:
            Pending invites in store order
        """
        with logfire.span("confirmation_service.list_pending_for_email"):
            invites = await self.confirmation_repository.find(
                ConfirmationFilter(
                    type=ConfirmationType.CLINICIAN_INVITE,
                    email=email,
                    status=ConfirmationStatus.PENDING,
                )
            )
            logfire.info("Pending invites listed", count=len(invites))
            return invites

    async def save(self, confirmation: Confirmation, operation: str) -> Confirmation:
        """Persist a confirmation.

        Args:
            confirmation: Confirmation to save
            operation: Name of the calling operation, for logs

        Returns:
            Saved confirmation

        Raises:
            InvalidStatusTransitionError: If the stored confirmation is closed
            PersistenceError: If the store rejected the write
        """
        try:
            saved = await self.confirmation_repository.save(confirmation)
        except ConfirmationConflictError:
            logfire.warn(
                "Confirmation already closed", operation=operation, key=confirmation.key
            )
            raise
        except Exception as e:
            logfire.error(
                "Saving confirmation failed",
                operation=operation,
                key=confirmation.key,
                error=str(e),
            )
            raise PersistenceError(f"Saving confirmation {confirmation.key} failed") from e

        logfire.info(
            "Confirmation saved",
            operation=operation,
            key=saved.key,
            status=saved.status.value,
        )
        return saved

    async def transition(
        self, confirmation: Confirmation, status: ConfirmationStatus, operation: str
    ) -> Confirmation:
        """Move a pending confirmation to a terminal status and persist it.

        Raises:
            InvalidStatusTransitionError: If the confirmation is not pending
            PersistenceError: If the store rejected the write
        """
        return await self.save(confirmation.with_status(status), operation)

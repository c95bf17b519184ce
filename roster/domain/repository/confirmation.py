"""Confirmation repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.confirmation import Confirmation
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    ConfirmationType,
    UserId,
)
from roster.domain.value.common import ValueObject


class ConfirmationFilter(ValueObject):
    """Filter for confirmation lookups.

    Type is mandatory since the store holds every invite flow's records.
    Fields left as None do not constrain the query.
    """

    type: ConfirmationType
    key: Optional[ConfirmationKey] = None
    email: Optional[str] = None
    clinic_id: Optional[ClinicId] = None
    user_id: Optional[UserId] = None
    status: Optional[ConfirmationStatus] = None

    def matches(self, confirmation: Confirmation) -> bool:
        """Check whether a confirmation satisfies every set field."""
        criteria = self.model_dump(exclude_none=True)
        return all(getattr(confirmation, name) == value for name, value in criteria.items())


class ConfirmationRepository(ABC):
    """Repository for Confirmation entity.

    Defines the contract for confirmation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, criteria: ConfirmationFilter) -> list[Confirmation]:
        """Find confirmations matching a filter.

        Args:
            criteria: Filter to apply

        Returns:
            Matching confirmations, oldest first
        """
        pass

    @abstractmethod
    async def find_one(self, criteria: ConfirmationFilter) -> Confirmation | None:
        """Find the first confirmation matching a filter.

        Args:
            criteria: Filter to apply

        Returns:
            The confirmation if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, confirmation: Confirmation) -> Confirmation:
        """Save a confirmation (create or update by key).

        A stored confirmation that is no longer pending must not be overwritten.

        Args:
            confirmation: The confirmation to save

        Returns:
            The saved confirmation

        Raises:
            InvalidStatusTransitionError: If the stored confirmation is closed
        """
        pass

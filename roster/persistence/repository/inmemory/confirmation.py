"""In-memory confirmation repository for testing."""

from roster.domain.error import InvalidStatusTransitionError
from roster.domain.model import Confirmation
from roster.domain.repository import ConfirmationFilter, ConfirmationRepository


class InMemoryConfirmationRepository(ConfirmationRepository):
    """In-memory implementation of ConfirmationRepository for testing."""

    def __init__(self) -> None:
        self._confirmations: list[Confirmation] = []
        self.fail_saves = False

    async def find(self, criteria: ConfirmationFilter) -> list[Confirmation]:
        """Find confirmations matching a filter, in insertion order."""
        return [c for c in self._confirmations if criteria.matches(c)]

    async def find_one(self, criteria: ConfirmationFilter) -> Confirmation | None:
        """Find the first confirmation matching a filter."""
        for confirmation in self._confirmations:
            if criteria.matches(confirmation):
                return confirmation
        return None

    async def save(self, confirmation: Confirmation) -> Confirmation:
        """Save a confirmation (create or update by key).

        Raises:
            RuntimeError: When saves are switched off to simulate store outages
            InvalidStatusTransitionError: If the stored confirmation is closed
        """
        if self.fail_saves:
            raise RuntimeError("Confirmation store unavailable")

        for i, existing in enumerate(self._confirmations):
            if existing.key == confirmation.key:
                if not existing.is_pending:
                    raise InvalidStatusTransitionError(
                        existing.key, existing.status.value, confirmation.status.value
                    )
                self._confirmations[i] = confirmation
                return confirmation

        self._confirmations.append(confirmation)
        return confirmation

"""PostgreSQL implementation of Confirmation repository."""

from sqlalchemy import Select, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.error import InvalidStatusTransitionError
from roster.domain.model import Confirmation
from roster.domain.repository import ConfirmationFilter, ConfirmationRepository
from roster.domain.value import ConfirmationStatus
from roster.persistence.mappers import confirmation_to_dict, row_to_confirmation
from roster.persistence.tables import confirmations_table


class PostgresConfirmationRepository(ConfirmationRepository):
    """PostgreSQL implementation of ConfirmationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select(self, criteria: ConfirmationFilter) -> Select:
        """Build a select constrained by every set filter field."""
        stmt = select(confirmations_table)
        for name, value in criteria.model_dump(exclude_none=True, mode="json").items():
            stmt = stmt.where(confirmations_table.c[name] == value)
        return stmt.order_by(confirmations_table.c.created)

    async def find(self, criteria: ConfirmationFilter) -> list[Confirmation]:
        """Find confirmations matching a filter, oldest first."""
        result = await self.session.execute(self._select(criteria))
        rows = result.mappings().all()
        return [row_to_confirmation(dict(row)) for row in rows]

    async def find_one(self, criteria: ConfirmationFilter) -> Confirmation | None:
        """Find the first confirmation matching a filter."""
        result = await self.session.execute(self._select(criteria).limit(1))
        row = result.mappings().first()
        return row_to_confirmation(dict(row)) if row else None

    async def save(self, confirmation: Confirmation) -> Confirmation:
        """Save a confirmation (create or update by key).

        Only pending rows are updated; a closed row is never overwritten.

        Args:
            confirmation: Confirmation to save

        Returns:
            Saved confirmation

        Raises:
            InvalidStatusTransitionError: If the stored row is already closed
        """
        values = confirmation_to_dict(confirmation)

        result = await self.session.execute(
            select(confirmations_table.c.status)
            .where(confirmations_table.c.key == confirmation.key)
            .with_for_update()
        )
        current = result.scalar_one_or_none()
        if current is not None and current != ConfirmationStatus.PENDING.value:
            raise InvalidStatusTransitionError(
                confirmation.key, current, confirmation.status.value
            )

        if current is not None:
            stmt = (
                update(confirmations_table)
                .where(confirmations_table.c.key == confirmation.key)
                .values(**values)
            )
        else:
            stmt = insert(confirmations_table).values(**values)

        await self.session.execute(stmt)
        await self.session.flush()
        return confirmation

"""PostgreSQL repository implementations."""

from roster.persistence.repository.confirmation import PostgresConfirmationRepository

__all__ = [
    "PostgresConfirmationRepository",
]

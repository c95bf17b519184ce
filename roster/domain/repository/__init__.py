"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from roster.domain.repository.confirmation import (
    ConfirmationFilter,
    ConfirmationRepository,
)

__all__ = [
    "ConfirmationFilter",
    "ConfirmationRepository",
]

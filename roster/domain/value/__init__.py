"""Domain value objects for the clinician invite service."""

from roster.domain.value.identifiers import ClinicId, ConfirmationKey, UserId
from roster.domain.value.types import (
    SESSION_TOKEN_HEADER,
    ConfirmationStatus,
    ConfirmationType,
    TemplateName,
    TokenData,
)

__all__ = [
    # Identifiers
    "ClinicId",
    "ConfirmationKey",
    "UserId",
    # Types
    "ConfirmationStatus",
    "ConfirmationType",
    "TemplateName",
    "TokenData",
    # Protocol
    "SESSION_TOKEN_HEADER",
]

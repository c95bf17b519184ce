"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from roster.domain.model import Confirmation, Creator, Profile
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    ConfirmationType,
    TemplateName,
    UserId,
)


def row_to_confirmation(row: Dict[str, Any]) -> Confirmation:
    """Convert database row to Confirmation domain model.

    Args:
        row: Database row as dict

    Returns:
        Confirmation domain model
    """
    full_name = row.get("creator_full_name")
    return Confirmation(
        key=ConfirmationKey(row["key"]),
        type=ConfirmationType(row["type"]),
        status=ConfirmationStatus(row["status"]),
        email=row["email"],
        user_id=UserId(row["user_id"]) if row.get("user_id") else None,
        clinic_id=ClinicId(row["clinic_id"]) if row.get("clinic_id") else None,
        creator_id=UserId(row["creator_id"]) if row.get("creator_id") else None,
        creator=Creator(
            clinic_id=row.get("creator_clinic_id"),
            clinic_name=row.get("creator_clinic_name"),
            profile=Profile(full_name=full_name) if full_name is not None else None,
        ),
        template_name=TemplateName(row["template_name"]),
        created=row["created"],
        modified=row.get("modified"),
    )


def confirmation_to_dict(confirmation: Confirmation) -> Dict[str, Any]:
    """Convert Confirmation domain model to database dict.

    Args:
        confirmation: Confirmation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    creator = confirmation.creator
    return {
        "key": confirmation.key,
        "type": confirmation.type.value,
        "status": confirmation.status.value,
        "email": confirmation.email,
        "user_id": confirmation.user_id,
        "clinic_id": confirmation.clinic_id,
        "creator_id": confirmation.creator_id,
        "creator_clinic_id": creator.clinic_id,
        "creator_clinic_name": creator.clinic_name,
        "creator_full_name": creator.profile.full_name if creator.profile else None,
        "template_name": confirmation.template_name.value,
        "created": confirmation.created,
        "modified": confirmation.modified,
    }

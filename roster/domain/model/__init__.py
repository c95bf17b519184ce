"""Domain model entities for the clinician invite service."""

from roster.domain.model.account import Account
from roster.domain.model.clinic import Clinic, Clinician, ClinicResponse
from roster.domain.model.confirmation import Confirmation, Creator, Profile

__all__ = [
    "Account",
    "Clinic",
    "Clinician",
    "ClinicResponse",
    "Confirmation",
    "Creator",
    "Profile",
]

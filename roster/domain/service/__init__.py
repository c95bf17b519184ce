"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service
from .clinic import ClinicClient
from .confirmation_service import ConfirmationService
from .identity import IdentityClient
from .jwt_service import JWTService
from .notification_service import EmailSender, NotificationService, ProfileClient

__all__ = [
    "AuthorizationService",
    "ClinicClient",
    "ConfirmationService",
    "EmailSender",
    "IdentityClient",
    "JWTService",
    "NotificationService",
    "ProfileClient",
    "Service",
]

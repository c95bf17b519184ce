"""Domain layer DI providers."""

from dishka import Scope, provide

from roster.adapter.email.renderer import TemplateRenderer
from roster.config import AuthSettings, ClinicServiceSettings, EmailSettings
from roster.domain.repository import ConfirmationRepository
from roster.domain.service import (
    AuthorizationService,
    ClinicClient,
    ConfirmationService,
    EmailSender,
    IdentityClient,
    JWTService,
    NotificationService,
    ProfileClient,
)
from roster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_confirmation_service(
        self, confirmation_repository: ConfirmationRepository
    ) -> ConfirmationService:
        """Provide confirmation domain service."""
        return ConfirmationService(confirmation_repository=confirmation_repository)

    @provide
    def get_authorization_service(
        self,
        clinic_client: ClinicClient,
        identity_client: IdentityClient,
        clinic_settings: ClinicServiceSettings,
    ) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService(
            clinic_client=clinic_client,
            identity_client=identity_client,
            admin_role=clinic_settings.admin_role,
        )

    @provide
    def get_notification_service(
        self,
        profile_client: ProfileClient,
        email_sender: EmailSender,
        renderer: TemplateRenderer,
        jwt_service: JWTService,
        email_settings: EmailSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            profile_client=profile_client,
            email_sender=email_sender,
            renderer=renderer,
            jwt_service=jwt_service,
            email_settings=email_settings,
        )

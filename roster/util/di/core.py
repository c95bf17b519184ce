"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from roster.config import (
    AuthSettings,
    ClinicServiceSettings,
    EmailSettings,
    IdentityServiceSettings,
    ProfileServiceSettings,
    Settings,
)
from roster.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_clinic_settings(self, settings: Settings) -> ClinicServiceSettings:
        """Provide clinic service settings."""
        return settings.clinic

    @provide
    def provide_identity_settings(
        self, settings: Settings
    ) -> IdentityServiceSettings:
        """Provide identity service settings."""
        return settings.identity

    @provide
    def provide_profile_settings(self, settings: Settings) -> ProfileServiceSettings:
        """Provide profile service settings."""
        return settings.profile

    @provide
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide email settings."""
        return settings.email

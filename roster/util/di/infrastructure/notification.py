"""Notification infrastructure providers (profiles and email delivery)."""

from dishka import Scope, provide

from roster.adapter.email.sender import HttpEmailSender
from roster.adapter.profile.client import HttpProfileClient
from roster.config import EmailSettings, ProfileServiceSettings
from roster.domain.service import EmailSender, ProfileClient
from roster.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_profile_client(self, settings: ProfileServiceSettings) -> ProfileClient:
        """Provide profile service client."""
        return HttpProfileClient(settings)

    @provide
    def get_email_sender(self, settings: EmailSettings) -> EmailSender:
        """Provide email sender."""
        return HttpEmailSender(settings)

"""Notification domain service.

Sends the invite email for a confirmation. Delivery is best effort: the
confirmation is already durable when this runs, and resending the invite is
the recovery path, so failures are logged and never raised.
"""

import logfire

from roster.adapter.email.renderer import TemplateRenderer
from roster.adapter.error import ProviderError
from roster.config import EmailSettings
from roster.domain.model import Confirmation, Profile
from roster.domain.value import UserId

from .base import Service
from .jwt_service import JWTService


class ProfileClient:
    """Client for the profile service."""

    async def get_profile(self, user_id: UserId, session_token: str) -> Profile | None:
        """Fetch a user's display profile.

        Args:
            user_id: User to look up
            session_token: Credential to authenticate the lookup with

        Returns:
            The profile if one exists, None otherwise

        Raises:
            ProviderError: If the profile service could not be reached
        """
        raise NotImplementedError


class EmailSender:
    """Outbound email delivery."""

    async def send(
        self, to: str, subject: str, html_body: str, idempotency_key: str
    ) -> bool:
        """Send an email.

        Deliveries sharing an idempotency key are sent at most once.

        Args:
            to: Recipient address
            subject: Subject line
            html_body: Rendered HTML body
            idempotency_key: Deduplication key for this delivery

        Returns:
            True if the email was accepted for delivery

        Raises:
            ProviderError: If the email backend could not be reached
        """
        raise NotImplementedError


def build_content(confirmation: Confirmation) -> dict[str, str]:
    """Build the template variables for a clinician invite email.

    Recipients who already have an account are sent to login, everyone else
    to signup.
    """
    profile = confirmation.creator.profile
    return {
        "ClinicName": confirmation.creator.clinic_name or "",
        "CreatorName": profile.full_name if profile else "",
        "Email": confirmation.email,
        "WebPath": "login" if confirmation.user_id else "signup",
    }


class NotificationService(Service):
    """Domain service for invite notifications."""

    def __init__(
        self,
        profile_client: ProfileClient,
        email_sender: EmailSender,
        renderer: TemplateRenderer,
        jwt_service: JWTService,
        email_settings: EmailSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            profile_client: Profile service client
            email_sender: Email delivery backend
            renderer: Email template renderer
            jwt_service: Mints the server credential for profile lookups
            email_settings: Email configuration
        """
        self.profile_client = profile_client
        self.email_sender = email_sender
        self.renderer = renderer
        self.jwt_service = jwt_service
        self.email_settings = email_settings

    async def attach_profile(self, confirmation: Confirmation) -> Confirmation:
        """Snapshot the creator's profile onto the confirmation.

        Args:
            confirmation: Confirmation to enrich

        Returns:
            The confirmation with the creator profile attached when it could
            be fetched, otherwise unchanged
        """
        if not confirmation.creator_id:
            return confirmation

        try:
            profile = await self.profile_client.get_profile(
                confirmation.creator_id, self.jwt_service.create_server_token()
            )
        except ProviderError as e:
            logfire.error(
                "Fetching creator profile failed",
                key=confirmation.key,
                creator_id=confirmation.creator_id,
                error=str(e),
            )
            return confirmation

        if profile is None:
            logfire.warn(
                "Creator has no profile",
                key=confirmation.key,
                creator_id=confirmation.creator_id,
            )
            return confirmation
        return confirmation.with_profile(profile)

    async def deliver(self, confirmation: Confirmation) -> Confirmation:
        """Send the invite email.

        The creator profile is fetched first unless it is already attached.
        Without it no email is sent.

        Args:
            confirmation: Persisted confirmation

        Returns:
            The confirmation, with the creator profile attached when it could
            be fetched
        """
        with logfire.span(
            "notification_service.deliver",
            key=confirmation.key,
            template=confirmation.template_name.value,
        ):
            if confirmation.creator.profile is None:
                confirmation = await self.attach_profile(confirmation)
                if confirmation.creator_id and confirmation.creator.profile is None:
                    return confirmation

            content = build_content(confirmation)
            content["InviteLink"] = (
                f"{self.email_settings.blip_url}/{content['WebPath']}"
                f"?inviteId={confirmation.key}"
            )

            try:
                subject, html_body = self.renderer.render_template(
                    confirmation.template_name, content
                )
                sent = await self.email_sender.send(
                    to=confirmation.email,
                    subject=subject,
                    html_body=html_body,
                    idempotency_key=self.idempotency_key(confirmation),
                )
            except Exception as e:
                logfire.error(
                    "Sending invite notification failed",
                    key=confirmation.key,
                    error=str(e),
                )
                return confirmation

            if sent:
                logfire.info("Invite notification sent", key=confirmation.key)
            else:
                logfire.warn("Invite notification not sent", key=confirmation.key)
            return confirmation

    @staticmethod
    def idempotency_key(confirmation: Confirmation) -> str:
        """Deduplication key for one send or resend of a confirmation."""
        stamp = (confirmation.modified or confirmation.created).isoformat()
        return f"{confirmation.key}:{stamp}"

"""HTTP email sender."""

import httpx
import logfire

from roster.adapter.error import ProviderError
from roster.config import EmailSettings
from roster.domain.service.notification_service import EmailSender


class HttpEmailSender(EmailSender):
    """Sends email through an HTTP email API.

    The API deduplicates deliveries by the Idempotency-Key header.
    """

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize the sender.

        Args:
            settings: Email configuration
        """
        self.settings = settings

    async def send(
        self, to: str, subject: str, html_body: str, idempotency_key: str
    ) -> bool:
        """Send an email via the email API.

        Raises:
            ProviderError: If the email API could not be reached
        """
        headers = {"Idempotency-Key": idempotency_key}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        payload = {
            "from": f"{self.settings.from_name} <{self.settings.from_email}>",
            "to": [to],
            "subject": subject,
            "html": html_body,
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.settings.api_url, timeout=self.settings.timeout_seconds
            ) as client:
                response = await client.post("/emails", json=payload, headers=headers)
        except httpx.HTTPError as e:
            logfire.error("Email API HTTP error", error=str(e))
            raise ProviderError(f"HTTP error sending email: {e}") from e

        if response.status_code not in (200, 201, 202):
            logfire.error(
                "Email API rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            return False

        logfire.info("Email accepted", idempotency_key=idempotency_key)
        return True


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Records deliveries in memory, sending at most once per idempotency key.
    """

    def __init__(self) -> None:
        self.sent: dict[str, dict[str, str]] = {}
        self.fail = False

    async def send(
        self, to: str, subject: str, html_body: str, idempotency_key: str
    ) -> bool:
        """Record a delivery."""
        if self.fail:
            raise ProviderError("Mock email failure")
        if idempotency_key not in self.sent:
            self.sent[idempotency_key] = {
                "to": to,
                "subject": subject,
                "html": html_body,
            }
        return True

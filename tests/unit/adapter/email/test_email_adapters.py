"""Unit tests for the email renderer and HTTP sender."""

from unittest.mock import patch

import httpx
import pytest
from jinja2 import UndefinedError

from roster.adapter.email.renderer import TemplateRenderer
from roster.adapter.email.sender import HttpEmailSender
from roster.adapter.error import ProviderError
from roster.config import EmailSettings
from roster.domain.value import TemplateName

RealAsyncClient = httpx.AsyncClient

CONTENT = {
    "ClinicName": "Northside",
    "CreatorName": "Dr. Admin",
    "Email": "clinician@example.org",
    "WebPath": "signup",
    "InviteLink": "http://app.test/signup?inviteId=abc",
}


def _client_with(handler):
    def factory(*args, **kwargs):
        return RealAsyncClient(*args, transport=httpx.MockTransport(handler), **kwargs)

    return patch("httpx.AsyncClient", side_effect=factory)


class TestTemplateRenderer:
    def test_renders_clinician_invite(self):
        renderer = TemplateRenderer()

        subject, html = renderer.render_template(TemplateName.CLINICIAN_INVITE, CONTENT)

        assert subject == "You've been invited to join Northside"
        assert "Dr. Admin has" in html
        assert "Create an account" in html
        assert 'href="http://app.test/signup?inviteId=abc"' in html

    def test_escapes_html_in_content(self):
        renderer = TemplateRenderer()

        _, html = renderer.render_template(
            TemplateName.CLINICIAN_INVITE,
            {**CONTENT, "ClinicName": "<script>alert(1)</script>"},
        )

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_missing_variable_is_an_error(self):
        renderer = TemplateRenderer()

        with pytest.raises(UndefinedError):
            renderer.render("Hello {{ Missing }}", {})


class TestHttpEmailSender:
    @pytest.mark.asyncio
    async def test_posts_message_with_idempotency_key(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["key"] = request.headers["Idempotency-Key"]
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(202, json={"id": "msg-1"})

        sender = HttpEmailSender(
            EmailSettings(api_url="http://email.test", api_key="secret")
        )

        with _client_with(handler):
            sent = await sender.send("a@example.org", "Subject", "<p>x</p>", "k:1")

        assert sent is True
        assert seen == {"path": "/emails", "key": "k:1", "auth": "Bearer secret"}

    @pytest.mark.asyncio
    async def test_rejected_message_returns_false(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"message": "bad recipient"})

        sender = HttpEmailSender(EmailSettings(api_url="http://email.test"))

        with _client_with(handler):
            assert await sender.send("a@example.org", "S", "B", "k:1") is False

    @pytest.mark.asyncio
    async def test_unreachable_api_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        sender = HttpEmailSender(EmailSettings(api_url="http://email.test"))

        with _client_with(handler):
            with pytest.raises(ProviderError):
                await sender.send("a@example.org", "S", "B", "k:1")

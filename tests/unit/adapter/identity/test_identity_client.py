"""Unit tests for the HTTP identity and profile clients."""

from unittest.mock import patch

import httpx
import pytest

from roster.adapter.error import ProviderError
from roster.adapter.identity.client import HttpIdentityClient
from roster.adapter.profile.client import HttpProfileClient
from roster.config import IdentityServiceSettings, ProfileServiceSettings
from roster.domain.value import SESSION_TOKEN_HEADER, UserId

RealAsyncClient = httpx.AsyncClient


def _client_with(handler):
    def factory(*args, **kwargs):
        return RealAsyncClient(*args, transport=httpx.MockTransport(handler), **kwargs)

    return patch("httpx.AsyncClient", side_effect=factory)


class TestHttpIdentityClient:
    @pytest.mark.asyncio
    async def test_resolves_account(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/user/clinician@example.org"
            assert request.headers[SESSION_TOKEN_HEADER] == "s"
            return httpx.Response(
                200,
                json={
                    "userid": "clinician-7",
                    "username": "clinician@example.org",
                    "emails": ["clinician@example.org"],
                    "emailVerified": True,
                },
            )

        client = HttpIdentityClient(IdentityServiceSettings(base_url="http://id.test"))

        with _client_with(handler):
            account = await client.resolve_user("clinician@example.org", "s")

        assert account.user_id == "clinician-7"
        assert account.primary_email == "clinician@example.org"

    @pytest.mark.asyncio
    async def test_unknown_account_is_none(self):
        client = HttpIdentityClient(IdentityServiceSettings(base_url="http://id.test"))

        with _client_with(lambda request: httpx.Response(404)):
            assert await client.resolve_user("nobody@example.org", "s") is None

    @pytest.mark.asyncio
    async def test_server_error_raises_provider_error(self):
        client = HttpIdentityClient(IdentityServiceSettings(base_url="http://id.test"))

        with _client_with(lambda request: httpx.Response(500, text="boom")):
            with pytest.raises(ProviderError):
                await client.resolve_user("nobody@example.org", "s")


class TestHttpProfileClient:
    @pytest.mark.asyncio
    async def test_reads_full_name(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/metadata/admin-1/profile"
            assert request.headers[SESSION_TOKEN_HEADER] == "s"
            return httpx.Response(200, json={"fullName": "Dr. Admin"})

        client = HttpProfileClient(ProfileServiceSettings(base_url="http://meta.test"))

        with _client_with(handler):
            profile = await client.get_profile(UserId("admin-1"), "s")

        assert profile.full_name == "Dr. Admin"

    @pytest.mark.asyncio
    async def test_missing_profile_is_none(self):
        client = HttpProfileClient(ProfileServiceSettings(base_url="http://meta.test"))

        with _client_with(lambda request: httpx.Response(404)):
            assert await client.get_profile(UserId("admin-1"), "s") is None

"""Unit tests for the HTTP clinic service client."""

import json
from unittest.mock import patch

import httpx
import pytest

from roster.adapter.clinic.client import HttpClinicClient
from roster.adapter.error import ProviderError
from roster.config import ClinicServiceSettings
from roster.domain.value import ClinicId, UserId

RealAsyncClient = httpx.AsyncClient


def _client_with(handler):
    """Patch httpx.AsyncClient so requests are answered by ``handler``."""

    def factory(*args, **kwargs):
        return RealAsyncClient(*args, transport=httpx.MockTransport(handler), **kwargs)

    return patch("httpx.AsyncClient", side_effect=factory)


@pytest.fixture
def client():
    return HttpClinicClient(ClinicServiceSettings(base_url="http://clinic.test"))


class TestHttpClinicClient:
    @pytest.mark.asyncio
    async def test_forwards_session_token_and_returns_raw_response(self, client):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["token"] = request.headers["X-Tidepool-Session-Token"]
            return httpx.Response(200, json={"id": "clinic-1", "name": "Northside"})

        with _client_with(handler):
            response = await client.get_clinic(ClinicId("clinic-1"), "session-abc")

        assert seen == {"path": "/v1/clinics/clinic-1", "token": "session-abc"}
        assert response.ok
        assert json.loads(response.body)["name"] == "Northside"

    @pytest.mark.asyncio
    async def test_create_invite_posts_invite_id_email_and_roles(self, client):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=seen["body"])

        with _client_with(handler):
            await client.create_clinician_invite(
                ClinicId("clinic-1"),
                "invite-1",
                "clinician@example.org",
                ["CLINIC_MEMBER"],
                "session-abc",
            )

        assert seen["method"] == "POST"
        assert seen["path"] == "/v1/clinics/clinic-1/clinicians"
        assert seen["body"] == {
            "inviteId": "invite-1",
            "email": "clinician@example.org",
            "roles": ["CLINIC_MEMBER"],
        }

    @pytest.mark.asyncio
    async def test_associate_patches_invite_with_user_id(self, client):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "clinician-7"})

        with _client_with(handler):
            await client.associate_clinician_to_user(
                ClinicId("clinic-1"), "invite-1", UserId("clinician-7"), "session-abc"
            )

        assert seen["method"] == "PATCH"
        assert seen["path"] == "/v1/clinics/clinic-1/invites/clinicians/invite-1/clinician"
        assert seen["body"] == {"userId": "clinician-7"}

    @pytest.mark.asyncio
    async def test_non_success_status_is_returned_not_raised(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"message": "duplicate"})

        with _client_with(handler):
            response = await client.create_clinician_invite(
                ClinicId("clinic-1"), "invite-1", "a@example.org", ["X"], "s"
            )

        assert response.status_code == 409
        assert not response.ok
        assert json.loads(response.body) == {"message": "duplicate"}

    @pytest.mark.asyncio
    async def test_transport_failure_raises_provider_error(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client_with(handler):
            with pytest.raises(ProviderError):
                await client.get_clinic(ClinicId("clinic-1"), "session-abc")

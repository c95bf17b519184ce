"""Clinic service client implementation.

Talks to the clinic service's REST API. Responses are returned raw (status
and body) so relay paths can forward them untouched.
"""

import json
from typing import Any

import httpx
import logfire

from roster.adapter.error import ProviderError
from roster.config import ClinicServiceSettings
from roster.domain.model import ClinicResponse
from roster.domain.service.clinic import ClinicClient
from roster.domain.value import SESSION_TOKEN_HEADER, ClinicId, UserId


class HttpClinicClient(ClinicClient):
    """Clinic service client over HTTP."""

    def __init__(self, settings: ClinicServiceSettings) -> None:
        """Initialize clinic client.

        Args:
            settings: Clinic service configuration
        """
        self.settings = settings

    async def get_clinic(
        self, clinic_id: ClinicId, session_token: str
    ) -> ClinicResponse:
        return await self._request("GET", f"/v1/clinics/{clinic_id}", session_token)

    async def get_clinician(
        self, clinic_id: ClinicId, user_id: UserId, session_token: str
    ) -> ClinicResponse:
        return await self._request(
            "GET", f"/v1/clinics/{clinic_id}/clinicians/{user_id}", session_token
        )

    async def create_clinician_invite(
        self,
        clinic_id: ClinicId,
        invite_id: str,
        email: str,
        roles: list[str],
        session_token: str,
    ) -> ClinicResponse:
        return await self._request(
            "POST",
            f"/v1/clinics/{clinic_id}/clinicians",
            session_token,
            json={"inviteId": invite_id, "email": email, "roles": roles},
        )

    async def get_invited_clinician(
        self, clinic_id: ClinicId, invite_id: str, session_token: str
    ) -> ClinicResponse:
        return await self._request(
            "GET", self._invite_path(clinic_id, invite_id), session_token
        )

    async def delete_invited_clinician(
        self, clinic_id: ClinicId, invite_id: str, session_token: str
    ) -> ClinicResponse:
        return await self._request(
            "DELETE", self._invite_path(clinic_id, invite_id), session_token
        )

    async def associate_clinician_to_user(
        self,
        clinic_id: ClinicId,
        invite_id: str,
        user_id: UserId,
        session_token: str,
    ) -> ClinicResponse:
        return await self._request(
            "PATCH",
            self._invite_path(clinic_id, invite_id),
            session_token,
            json={"userId": user_id},
        )

    @staticmethod
    def _invite_path(clinic_id: ClinicId, invite_id: str) -> str:
        return f"/v1/clinics/{clinic_id}/invites/clinicians/{invite_id}/clinician"

    async def _request(
        self,
        method: str,
        path: str,
        session_token: str,
        json: dict[str, Any] | None = None,
    ) -> ClinicResponse:
        """Send a request to the clinic service.

        Raises:
            ProviderError: If the request could not be completed
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout_seconds,
            ) as client:
                response = await client.request(
                    method,
                    path,
                    json=json,
                    headers={SESSION_TOKEN_HEADER: session_token},
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Clinic service HTTP error", method=method, path=path, error=str(e)
            )
            raise ProviderError(f"HTTP error calling clinic service: {e}") from e

        if response.status_code != 200:
            logfire.warn(
                "Clinic service non-success response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
        return ClinicResponse(status_code=response.status_code, body=response.content)


def _json_response(status_code: int, payload: Any) -> ClinicResponse:
    return ClinicResponse(status_code=status_code, body=json.dumps(payload).encode())


def _error_response(status_code: int, message: str) -> ClinicResponse:
    return _json_response(status_code, {"code": status_code, "message": message})


class MockClinicClient(ClinicClient):
    """Mock clinic client for testing.

    Keeps clinics, clinicians and pending invites in memory. Individual
    operations can be forced to answer with a status or to fail in transport.
    """

    def __init__(self) -> None:
        """Initialize mock client with empty state."""
        self.clinics: dict[str, dict[str, Any]] = {}
        self.clinicians: dict[tuple[str, str], dict[str, Any]] = {}
        self.invites: dict[tuple[str, str], dict[str, Any]] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.forced_status: dict[str, int] = {}
        self.transport_errors: set[str] = set()

    def add_clinic(self, clinic_id: str, name: str) -> None:
        self.clinics[clinic_id] = {"id": clinic_id, "name": name}

    def add_clinician(self, clinic_id: str, user_id: str, roles: list[str]) -> None:
        self.clinicians[(clinic_id, user_id)] = {"id": user_id, "roles": roles}

    def add_invite(
        self, clinic_id: str, invite_id: str, email: str, roles: list[str] | None = None
    ) -> None:
        self.invites[(clinic_id, invite_id)] = {
            "inviteId": invite_id,
            "email": email,
            "roles": roles or ["CLINIC_MEMBER"],
        }

    def calls_to(self, operation: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == operation]

    def _intercept(self, operation: str, *args: Any) -> ClinicResponse | None:
        self.calls.append((operation, args))
        if operation in self.transport_errors:
            raise ProviderError(f"Mock transport failure in {operation}")
        if operation in self.forced_status:
            return _error_response(self.forced_status[operation], "forced")
        return None

    async def get_clinic(
        self, clinic_id: ClinicId, session_token: str
    ) -> ClinicResponse:
        forced = self._intercept("get_clinic", clinic_id)
        if forced:
            return forced
        clinic = self.clinics.get(clinic_id)
        if clinic is None:
            return _error_response(404, "clinic not found")
        return _json_response(200, clinic)

    async def get_clinician(
        self, clinic_id: ClinicId, user_id: UserId, session_token: str
    ) -> ClinicResponse:
        forced = self._intercept("get_clinician", clinic_id, user_id)
        if forced:
            return forced
        clinician = self.clinicians.get((clinic_id, user_id))
        if clinician is None:
            return _error_response(404, "clinician not found")
        return _json_response(200, clinician)

    async def create_clinician_invite(
        self,
        clinic_id: ClinicId,
        invite_id: str,
        email: str,
        roles: list[str],
        session_token: str,
    ) -> ClinicResponse:
        forced = self._intercept(
            "create_clinician_invite", clinic_id, invite_id, email, tuple(roles)
        )
        if forced:
            return forced
        if any(
            c == clinic_id and invite["email"] == email
            for (c, _), invite in self.invites.items()
        ):
            return _error_response(409, "clinician invite already exists")
        self.add_invite(clinic_id, invite_id, email, roles)
        return _json_response(200, self.invites[(clinic_id, invite_id)])

    async def get_invited_clinician(
        self, clinic_id: ClinicId, invite_id: str, session_token: str
    ) -> ClinicResponse:
        forced = self._intercept("get_invited_clinician", clinic_id, invite_id)
        if forced:
            return forced
        invite = self.invites.get((clinic_id, invite_id))
        if invite is None:
            return _error_response(404, "invite not found")
        return _json_response(200, invite)

    async def delete_invited_clinician(
        self, clinic_id: ClinicId, invite_id: str, session_token: str
    ) -> ClinicResponse:
        forced = self._intercept("delete_invited_clinician", clinic_id, invite_id)
        if forced:
            return forced
        if self.invites.pop((clinic_id, invite_id), None) is None:
            return _error_response(404, "invite not found")
        return _json_response(200, {})

    async def associate_clinician_to_user(
        self,
        clinic_id: ClinicId,
        invite_id: str,
        user_id: UserId,
        session_token: str,
    ) -> ClinicResponse:
        forced = self._intercept(
            "associate_clinician_to_user", clinic_id, invite_id, user_id
        )
        if forced:
            return forced
        invite = self.invites.pop((clinic_id, invite_id), None)
        if invite is None:
            return _error_response(404, "invite not found")
        clinician = {"id": user_id, "email": invite["email"], "roles": invite["roles"]}
        self.clinicians[(clinic_id, user_id)] = clinician
        return _json_response(200, clinician)

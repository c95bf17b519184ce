"""Profile service client implementation."""

import httpx
import logfire

from roster.adapter.error import ProviderError
from roster.config import ProfileServiceSettings
from roster.domain.model import Profile
from roster.domain.service.notification_service import ProfileClient
from roster.domain.value import SESSION_TOKEN_HEADER, UserId


class HttpProfileClient(ProfileClient):
    """Profile service client over HTTP."""

    def __init__(self, settings: ProfileServiceSettings) -> None:
        """Initialize profile client.

        Args:
            settings: Profile service configuration
        """
        self.settings = settings

    async def get_profile(self, user_id: UserId, session_token: str) -> Profile | None:
        """Fetch a profile via ``GET /metadata/{userId}/profile``."""
        try:
            async with httpx.AsyncClient(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout_seconds,
            ) as client:
                response = await client.get(
                    f"/metadata/{user_id}/profile",
                    headers={SESSION_TOKEN_HEADER: session_token},
                )
        except httpx.HTTPError as e:
            logfire.error("Profile service HTTP error", error=str(e))
            raise ProviderError(f"HTTP error fetching profile: {e}") from e

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise ProviderError(f"Profile lookup failed: {response.status_code}")

        data = response.json()
        return Profile(full_name=data.get("fullName", ""))


class MockProfileClient(ProfileClient):
    """Mock profile client for testing."""

    def __init__(self) -> None:
        self.profiles: dict[str, Profile] = {}
        self.fail = False

    def add_profile(self, user_id: str, full_name: str) -> None:
        self.profiles[user_id] = Profile(full_name=full_name)

    async def get_profile(self, user_id: UserId, session_token: str) -> Profile | None:
        """Return the in-memory profile, or a placeholder for unknown users."""
        if self.fail:
            raise ProviderError("Mock profile failure")
        return self.profiles.get(user_id, Profile(full_name="Clinic Admin"))

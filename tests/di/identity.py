"""Mock identity service providers for testing."""

from dishka import Scope, provide

from roster.adapter.identity.client import MockIdentityClient
from roster.domain.service import IdentityClient
from roster.util.di.infrastructure.identity import IdentityProvider


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider using in-memory accounts."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_client(self) -> IdentityClient:
        """Provide mock identity client."""
        return MockIdentityClient()

"""Identity service infrastructure providers."""

from dishka import Scope, provide

from roster.adapter.identity.client import HttpIdentityClient
from roster.config import IdentityServiceSettings
from roster.domain.service import IdentityClient
from roster.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity service provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: IdentityServiceSettings) -> IdentityClient:
        """Provide identity service client."""
        return HttpIdentityClient(settings)

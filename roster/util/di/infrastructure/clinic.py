"""Clinic service infrastructure providers."""

from dishka import Scope, provide

from roster.adapter.clinic.client import HttpClinicClient
from roster.config import ClinicServiceSettings
from roster.domain.service import ClinicClient
from roster.util.di.base import ProviderBase


class ClinicProvider(ProviderBase):
    """Clinic component base."""

    __mock_component__ = "clinic"


class ProdClinicProvider(ClinicProvider):
    """Production clinic service provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clinic_client(self, settings: ClinicServiceSettings) -> ClinicClient:
        """Provide clinic service client."""
        return HttpClinicClient(settings)

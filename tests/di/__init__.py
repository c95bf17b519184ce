"""Mock providers for testing."""

from .clinic import MockClinicProvider
from .identity import MockIdentityProvider
from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClinicProvider",
    "MockIdentityProvider",
    "MockNotificationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]

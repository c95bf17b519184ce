"""Infrastructure providers."""

# Import bases
from .clinic import ClinicProvider
from .identity import IdentityProvider
from .notification import NotificationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .clinic import ProdClinicProvider  # noqa: F401
from .identity import ProdIdentityProvider  # noqa: F401
from .notification import ProdNotificationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClinicProvider",
    "IdentityProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdClinicProvider",
    "ProdIdentityProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]

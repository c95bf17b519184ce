"""In-memory repository implementations for testing."""

from .confirmation import InMemoryConfirmationRepository

__all__ = [
    "InMemoryConfirmationRepository",
]

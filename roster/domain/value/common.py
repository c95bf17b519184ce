"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared by its fields.

    Used for token claims and repository filters.
    """

    model_config = ConfigDict(frozen=True)

"""Clinic service entities.

These mirror the subset of the clinic service's resources that invite
handling reads. The clinic service remains their source of truth.
"""

from typing import Optional, TypeVar

from pydantic import BaseModel, Field

from roster.domain.model.common import DomainModel
from roster.domain.value import ClinicId, UserId

M = TypeVar("M", bound=BaseModel)


class Clinic(DomainModel):
    """Clinic record."""

    id: ClinicId
    name: str


class Clinician(DomainModel):
    """Clinician membership of a clinic, possibly still an open invite."""

    id: Optional[UserId] = None
    invite_id: Optional[str] = Field(default=None, alias="inviteId")
    email: Optional[str] = None
    name: Optional[str] = None
    roles: list[str] = Field(default_factory=list)

    def has_role(self, role: str) -> bool:
        return role in self.roles


class ClinicResponse(DomainModel):
    """Raw response from the clinic service.

    Keeps the status and body untouched so relay paths can forward them.
    """

    status_code: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def parse(self, model: type[M]) -> M:
        """Decode the body into `model`."""
        return model.model_validate_json(self.body)

"""Account entity as resolved from the identity service."""

from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel
from roster.domain.value import UserId


class Account(DomainModel):
    """User account.

    The first entry of ``emails`` is the account's primary email and is what
    invite recipients are matched against.
    """

    user_id: UserId = Field(alias="userid")
    username: Optional[str] = None
    emails: list[str] = Field(default_factory=list)
    email_verified: bool = Field(default=False, alias="emailVerified")

    @property
    def primary_email(self) -> str | None:
        return self.emails[0] if self.emails else None

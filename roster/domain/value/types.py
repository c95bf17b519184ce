"""Domain value objects for the clinician invite service.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from roster.domain.value.common import ValueObject
from roster.domain.value.identifiers import UserId


class ConfirmationType(str, Enum):
    """Kind of confirmation.

    The confirmation store is shared by every invite flow, so queries must
    always filter on type. This service only produces clinician invites.
    """

    PASSWORD_RESET = "password_reset"
    SIGNUP_CONFIRMATION = "signup_confirmation"
    CARETEAM_INVITATION = "careteam_invitation"
    CLINICIAN_INVITE = "clinician_invite"


class ConfirmationStatus(str, Enum):
    """Status of a confirmation.

    PENDING is the only non-terminal status.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    DECLINED = "declined"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self is not ConfirmationStatus.PENDING


class TemplateName(str, Enum):
    """Email template used to notify the confirmation recipient."""

    CLINICIAN_INVITE = "clinician_invite"


# Header carrying the caller's session token, inbound and on outbound calls
SESSION_TOKEN_HEADER = "X-Tidepool-Session-Token"


class TokenData(ValueObject):
    """Verified identity of the caller of an operation.

    Server tokens are minted for service-to-service calls and carry no
    end-user identity of their own.
    """

    user_id: UserId
    is_server: bool = False
    session_token: str = ""  # Raw credential, forwarded on outbound calls

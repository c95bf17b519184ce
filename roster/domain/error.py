"""Domain layer errors.

Each error carries the HTTP status and stable error code the interface layer
reports to callers. Nothing here is retried.
"""


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 500
    code: str = "ERR_INTERNAL"

    def __init__(self, reason: str | None = None):
        self.reason = reason or self.code
        super().__init__(self.reason)


class UnauthorizedError(DomainError):
    """Raised when the caller fails an authorization check."""

    status_code = 401
    code = "ERR_UNAUTHORIZED"

    def __init__(self, reason: str = "Not authorized for requested operation"):
        super().__init__(reason)


class NotFoundError(DomainError):
    """Raised when no confirmation matches the requested invite."""

    status_code = 404
    code = "ERR_INVITE_NOT_FOUND"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class LookupFailedError(DomainError):
    """Raised when the caller's clinician record could not be fetched."""

    code = "ERR_FINDING_USR"


class FindingClinicFailedError(DomainError):
    """Raised when the clinic service could not be reached for a clinic lookup."""

    code = "ERR_FINDING_CLINIC"


class UpstreamFailureError(DomainError):
    """Raised when a remote mutation failed and local state was left untouched."""

    def __init__(self, code: str, reason: str):
        self.code = code
        super().__init__(reason)


class UpstreamRelayError(DomainError):
    """Remote non-success response that is forwarded to the caller verbatim."""

    def __init__(self, status_code: int, body: bytes):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Upstream responded with status {status_code}")


class PersistenceError(DomainError):
    """Raised when a confirmation could not be saved.

    When raised after a successful remote mutation the remote and local views
    disagree until an operator resends or resyncs the invite.
    """

    code = "ERR_SAVING_CONFIRMATION"


class ConfirmationConflictError(DomainError):
    """Base for confirmation state rule violations."""

    status_code = 409
    code = "ERR_CONFIRMATION_CONFLICT"


class InvalidStatusTransitionError(ConfirmationConflictError):
    """Raised when a status change would not move forward from pending."""

    def __init__(self, key: str, current: str, requested: str):
        super().__init__(
            f"Confirmation {key} cannot move from {current} to {requested}"
        )


class ImmutableFieldError(ConfirmationConflictError):
    """Raised when an immutable confirmation field would be overwritten."""

    def __init__(self, key: str, field: str):
        super().__init__(f"Confirmation {key} field '{field}' cannot be changed")

"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error.

    Raised when a remote service could not be reached or answered with
    something unusable. Non-success statuses that callers may want to relay
    are returned, not raised.
    """

    pass

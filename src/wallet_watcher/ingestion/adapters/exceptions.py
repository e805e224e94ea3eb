"""
Provider fetch exception hierarchy.

Only transport-level failures are exceptions. A response that parses as JSON
but lacks or mistypes a field is not an error: the field is simply not
observed.
"""


class FetchError(Exception):
    """Base exception for all provider fetch failures."""

    def __init__(
        self, message: str, status_code: int | None = None, endpoint: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class TransportError(FetchError):
    """Connection failure or timeout before a response was received."""

    pass


class BadStatusError(FetchError):
    """Provider answered with a non-success HTTP status."""

    pass


class MalformedBodyError(FetchError):
    """Response body is not valid JSON."""

    pass

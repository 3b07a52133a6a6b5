"""
Geocoding Exceptions
------------------
Every failure of a client call is raised as exactly one of the exceptions
below. The hierarchy is flat: callers branch on the class, and the underlying
transport or decode error is kept as ``__cause__``.

Messages never include the API key; transport errors in particular do not
repeat the text of the wrapped exception since it can contain the request URL.
"""
from w3w.models.errors import ErrorCode, ErrorResponse


class W3WError(Exception):
    """Base class for all what3words client errors."""


class ApiError(W3WError):
    """The service answered with a structured error."""

    def __init__(self, response: ErrorResponse):
        super().__init__(f"API returned an error: {response}")
        self.response = response

    @property
    def code(self) -> ErrorCode:
        return self.response.code

    @property
    def message(self) -> str:
        return self.response.message


class HttpTransportError(W3WError):
    """The HTTP request could not be completed."""


class JsonError(W3WError):
    """The response body is not JSON of the expected shape."""


class UrlError(W3WError):
    """A request URL could not be built from the base endpoint."""

"""Exception types raised by the followed rooms client.

All errors derive from FollowedRoomsError so callers (and the CLI) can catch
them at a single boundary.
"""


class FollowedRoomsError(Exception):
    """Base class for all client errors."""


class ConfigurationError(FollowedRoomsError):
    """Required credentials or settings are missing or invalid."""


class ValidationError(FollowedRoomsError):
    """A caller-supplied argument is invalid."""


class InvalidResponseError(FollowedRoomsError):
    """The API returned a payload that does not have the expected shape."""


class TransportError(FollowedRoomsError):
    """The API request failed at the HTTP level.

    Attributes:
        status: HTTP status code, or None when no response was received
        status_text: HTTP reason phrase, or the underlying error message
    """

    def __init__(self, status: int | None, status_text: str):
        self.status = status
        self.status_text = status_text
        if status is None:
            message = f"API request failed: {status_text}"
        else:
            message = f"API request failed: {status} {status_text}"
        super().__init__(message)

"""Exceptions raised by the Strava API client."""


class StravaError(Exception):
    """Base class for every error raised by this library."""

    pass


class TransportError(StravaError):
    """The request failed: no response, a timeout, or a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DeserializationError(StravaError):
    """The response body is not JSON or does not match the expected shape."""

    pass


class AuthError(StravaError):
    """An OAuth token exchange, refresh or deauthorization failed."""

    pass


class AuthTransportError(AuthError, TransportError):
    pass


class AuthDeserializationError(AuthError, DeserializationError):
    pass

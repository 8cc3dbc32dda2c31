"""OAuth credentials and the expiry bookkeeping of a login session."""

from datetime import datetime, timedelta, timezone
import time

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

DEFAULT_EXPIRY_TIMEOUT = timedelta(minutes=10)


class _OpaqueToken:
    """An opaque credential string.

    Tokens compare equal to tokens of the same type holding the same value, and
    to the raw string itself.
    """

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(
                f"{type(self).__name__} must wrap a str, not {type(value).__name__}"
            )
        self._value = value

    @classmethod
    def coerce(cls, value: object):
        """Return `value` as this token type, wrapping raw strings."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"{cls.__name__} must be a string")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self._value == other
        if type(other) is type(self):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('***')"


class AccessToken(_OpaqueToken):
    """Bearer credential sent with every API request."""


class RefreshToken(_OpaqueToken):
    """Long-lived credential exchanged for a new Login."""


def is_expired(login: "Login", now: float) -> bool:
    """Whether the login's access token expired before `now` (epoch seconds)."""
    return login.expires_at < now


def will_expire_soon(
    login: "Login", now: float, timeout: timedelta = DEFAULT_EXPIRY_TIMEOUT
) -> bool:
    """Whether the login's access token expires within `timeout` of `now`."""
    return login.expires_at < now + timeout.total_seconds()


class Login(BaseModel):
    """A login session as returned by the Strava token endpoint.

    The library never persists a Login; callers that refresh tokens must store
    the new one themselves (`model_dump_json` writes the tokens as strings).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    access_token: AccessToken
    refresh_token: RefreshToken
    expires_at: int
    expires_in: int | None = None
    token_type: str = "Bearer"

    @field_validator("access_token", mode="before")
    @classmethod
    def _parse_access_token(cls, value: object) -> AccessToken:
        return AccessToken.coerce(value)

    @field_validator("refresh_token", mode="before")
    @classmethod
    def _parse_refresh_token(cls, value: object) -> RefreshToken:
        return RefreshToken.coerce(value)

    @field_serializer("access_token", "refresh_token")
    def _serialize_token(self, token: AccessToken | RefreshToken) -> str:
        return str(token)

    def expires_at_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.expires_at, tz=timezone.utc)

    def is_expired(self) -> bool:
        """Check if the access token has expired."""
        return is_expired(self, time.time())

    def will_expire_soon(self, timeout: timedelta | None = None) -> bool:
        """Check if the access token expires within `timeout` (default 10 minutes)."""
        if timeout is None:
            timeout = DEFAULT_EXPIRY_TIMEOUT
        return will_expire_soon(self, time.time(), timeout)

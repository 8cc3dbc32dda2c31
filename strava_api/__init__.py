"""Typed client for the Strava v3 API."""

from . import activities, athlete
from .auth import build_oauth_authorize_url, deauthorize, login, refresh_token
from .client import Api, Context, Pagination
from .config import API_BASE_URL, Config
from .errors import (
    AuthDeserializationError,
    AuthError,
    AuthTransportError,
    DeserializationError,
    StravaError,
    TransportError,
)
from .models import (
    Activity,
    ActivityType,
    Athlete,
    FriendshipStatus,
    Gender,
    MeasurementPreference,
    PolylineMap,
)
from .tokens import AccessToken, Login, RefreshToken, is_expired, will_expire_soon

__all__ = [
    "activities",
    "athlete",
    "login",
    "refresh_token",
    "deauthorize",
    "build_oauth_authorize_url",
    "Api",
    "Context",
    "Pagination",
    "API_BASE_URL",
    "Config",
    "StravaError",
    "TransportError",
    "DeserializationError",
    "AuthError",
    "AuthTransportError",
    "AuthDeserializationError",
    "Activity",
    "ActivityType",
    "Athlete",
    "FriendshipStatus",
    "Gender",
    "MeasurementPreference",
    "PolylineMap",
    "AccessToken",
    "RefreshToken",
    "Login",
    "is_expired",
    "will_expire_soon",
]

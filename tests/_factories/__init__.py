from .strava import (
    ActivityPayloadFactory,
    AthletePayloadFactory,
    LoginFactory,
    make_response,
)

__all__ = [
    "ActivityPayloadFactory",
    "AthletePayloadFactory",
    "LoginFactory",
    "make_response",
]

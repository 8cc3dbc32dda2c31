from __future__ import annotations
from enum import Enum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# (latitude, longitude)
LatLng = tuple[float, float]


class ActivityType(str, Enum):
    """Sport of an activity.

    Strava adds new types over time; anything unrecognised becomes UNKNOWN.
    """

    RIDE = "Ride"
    RUN = "Run"
    SWIM = "Swim"
    HIKE = "Hike"
    WALK = "Walk"
    ALPINE_SKI = "AlpineSki"
    BACKCOUNTRY_SKI = "BackcountrySki"
    CANOEING = "Canoeing"
    CROSSFIT = "Crossfit"
    EBIKE_RIDE = "EBikeRide"
    ELLIPTICAL = "Elliptical"
    ICE_SKATE = "IceSkate"
    INLINE_SKATE = "InlineSkate"
    KAYAKING = "Kayaking"
    KITESURF = "Kitesurf"
    NORDIC_SKI = "NordicSki"
    ROCK_CLIMBING = "RockClimbing"
    ROLLER_SKI = "RollerSki"
    ROWING = "Rowing"
    SNOWBOARD = "Snowboard"
    SNOWSHOE = "Snowshoe"
    STAIR_STEPPER = "StairStepper"
    STAND_UP_PADDLING = "StandUpPaddling"
    SURFING = "Surfing"
    WEIGHT_TRAINING = "WeightTraining"
    WINDSURF = "Windsurf"
    WORKOUT = "Workout"
    YOGA = "Yoga"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> ActivityType:
        return cls.UNKNOWN


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


class FriendshipStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    BLOCKED = "blocked"


class MeasurementPreference(str, Enum):
    FEET = "feet"
    METERS = "meters"


class PolylineMap(BaseModel):
    """Route of an activity.

    Polylines use Google's encoding:
    https://developers.google.com/maps/documentation/utilities/polylinealgorithm
    """

    id: str
    polyline: str | None = None
    summary_polyline: str | None = None


class Activity(BaseModel):
    """An activity pulled from the Strava API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    upload_id: int | None = None
    activity_type: ActivityType | None = Field(default=None, alias="type")
    name: str | None = None
    distance: float | None = None  # meters
    moving_time: int | None = None  # seconds
    elapsed_time: int | None = None  # seconds
    total_elevation_gain: float | None = None
    elev_high: float | None = None  # meters
    elev_low: float | None = None  # meters
    start_date: AwareDatetime | None = None
    start_date_local: AwareDatetime | None = None
    timezone: str | None = None
    start_latlng: LatLng | None = None
    end_latlng: LatLng | None = None
    achievement_count: int | None = None
    kudos_count: int | None = None
    comment_count: int | None = None
    athlete_count: int | None = None
    photo_count: int | None = None  # Instagram photos only
    total_photo_count: int | None = None
    map: PolylineMap | None = None
    trainer: bool | None = None
    commute: bool | None = None
    manual: bool | None = None
    private: bool | None = None
    flagged: bool | None = None
    workout_type: int | None = None
    average_speed: float | None = None  # meters per second
    max_speed: float | None = None  # meters per second
    has_kudoed: bool | None = None
    gear_id: str | None = None
    # Rides only
    kilojoules: float | None = None
    average_watts: float | None = None
    device_watts: bool | None = None  # False if the watts are estimated
    # Rides with power meter data only
    max_watts: int | None = None
    weighted_average_watts: int | None = None

    @field_validator("start_latlng", "end_latlng", mode="before")
    @classmethod
    def _empty_latlng_is_none(cls, value: object) -> object:
        # Activities without GPS data report [] rather than null.
        if isinstance(value, (list, tuple)) and len(value) == 0:
            return None
        return value


class Athlete(BaseModel):
    """A Strava athlete."""

    id: int
    firstname: str | None = None
    lastname: str | None = None
    profile_medium: str | None = None  # URL to a 62x62 pixel profile picture
    profile: str | None = None  # URL to a 124x124 pixel profile picture
    city: str | None = None
    state: str | None = None
    country: str | None = None
    sex: Gender | None = None
    # Whether the logged-in athlete follows this athlete.
    friend: FriendshipStatus | None = None
    # Whether this athlete follows the logged-in athlete.
    follower: FriendshipStatus | None = None
    summit: bool | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
    follower_count: int | None = None
    friend_count: int | None = None
    mutual_friend_count: int | None = None
    measurement_preference: MeasurementPreference | None = None
    # Undocumented by Strava but still returned for some accounts.
    email: str | None = None
    ftp: int | None = None  # Functional Threshold Power
    weight: float | None = None


athlete_adapter = TypeAdapter(Athlete)
activity_adapter = TypeAdapter(Activity)
activity_list_adapter = TypeAdapter(list[Activity])

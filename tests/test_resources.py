import pytest

from strava_api import activities, athlete
from strava_api.client import Api, Context
from strava_api.errors import DeserializationError, TransportError
from strava_api.models import ActivityType
from strava_api.tokens import AccessToken

from ._factories import make_response

BASE_URL = "https://www.strava.com/api/v3"
AUTH_HEADERS = {"Authorization": "Bearer valid_token"}


@pytest.fixture
def api(http) -> Api:
    return Api(base_url=BASE_URL, http=http)


@pytest.fixture
def context() -> Context:
    return Context(access_token=AccessToken("valid_token"))


def test_current_athlete(api, context, http, athlete_payload_factory):
    http.request.return_value = make_response(json=athlete_payload_factory.make())

    me = athlete.current(api, context)

    assert me.id == 1234567890987654321
    assert me.lastname == "Teutenberg"
    http.request.assert_called_once_with(
        "GET", f"{BASE_URL}/athlete", headers=AUTH_HEADERS
    )


def test_current_athlete_unauthorized(api, context, http):
    http.request.return_value = make_response(
        status_code=401, json={"message": "Authorization Error"}
    )
    with pytest.raises(TransportError):
        athlete.current(api, context)


def test_latest_activities(api, context, http, activity_payload_factory):
    http.request.return_value = make_response(
        json=[activity_payload_factory.make({"id": i}) for i in range(3)],
        url=f"{BASE_URL}/athlete/activities",
    )

    latest = activities.latest(api, context)

    assert [a.id for a in latest] == [0, 1, 2]
    http.request.assert_called_once_with(
        "GET", f"{BASE_URL}/athlete/activities", headers=AUTH_HEADERS
    )


def test_activities_before(api, context, http, activity_payload_factory):
    http.request.return_value = make_response(json=[activity_payload_factory.make()])

    result = activities.before(1519000000, api, context)

    assert len(result) == 1
    http.request.assert_called_once_with(
        "GET",
        f"{BASE_URL}/athlete/activities",
        params=[("before", 1519000000), ("per_page", 30)],
        headers=AUTH_HEADERS,
    )


def test_activities_after(api, context, http):
    http.request.return_value = make_response(json=[])

    result = activities.after(1519000000, api, context)

    assert result == []
    http.request.assert_called_once_with(
        "GET",
        f"{BASE_URL}/athlete/activities",
        params=[("after", 1519000000), ("per_page", 30)],
        headers=AUTH_HEADERS,
    )


def test_activity_by_id(api, context, http, activity_payload_factory):
    http.request.return_value = make_response(
        json=activity_payload_factory.make({"id": 42, "type": "Kitesurf"})
    )

    activity = activities.by_id(42, api, context)

    assert activity.id == 42
    assert activity.activity_type is ActivityType.KITESURF
    http.request.assert_called_once_with(
        "GET", f"{BASE_URL}/activities/42", headers=AUTH_HEADERS
    )


def test_activity_by_id_not_found(api, context, http):
    http.request.return_value = make_response(
        status_code=404, json={"message": "Record Not Found"}
    )
    with pytest.raises(TransportError) as exc_info:
        activities.by_id(1, api, context)
    assert exc_info.value.status_code == 404


def test_activity_list_wrong_shape(api, context, http):
    http.request.return_value = make_response(json={"id": 1})
    with pytest.raises(DeserializationError):
        activities.latest(api, context)

from unittest.mock import MagicMock

import httpx
import pytest

from strava_api.config import Config

from ._factories import (
    ActivityPayloadFactory,
    AthletePayloadFactory,
    LoginFactory,
)


class AccidentalNetworkAccessError(Exception):
    """Raised when a unit test accidentally tries to reach the network."""

    pass


def _raise_network_access_error(*args, **kwargs):
    """Raise an error when a real HTTP request is attempted in unit tests."""
    raise AccidentalNetworkAccessError(
        "Unit test attempted a real HTTP request! "
        "Either pass a mocked client (see the `http` fixture), "
        "or mark this test as @pytest.mark.integration if it requires the real API."
    )


@pytest.fixture(autouse=True)
def prevent_network_access_in_unit_tests(request, monkeypatch):
    """Prevent accidental network access in unit tests.

    For tests marked with @pytest.mark.integration this does nothing. For all
    other tests, httpx.Client.send is patched to fail fast with a clear error.
    """
    markers = [marker.name for marker in request.node.iter_markers()]
    if "integration" in markers:
        yield
        return

    monkeypatch.setattr("httpx.Client.send", _raise_network_access_error)
    yield


@pytest.fixture
def http() -> MagicMock:
    """A stand-in for the shared httpx.Client."""
    return MagicMock(spec=httpx.Client)


@pytest.fixture
def config() -> Config:
    return Config(client_id=123, client_secret="456")


@pytest.fixture(scope="session")
def login_factory() -> LoginFactory:
    return LoginFactory()


@pytest.fixture(scope="session")
def activity_payload_factory() -> ActivityPayloadFactory:
    return ActivityPayloadFactory()


@pytest.fixture(scope="session")
def athlete_payload_factory() -> AthletePayloadFactory:
    return AthletePayloadFactory()

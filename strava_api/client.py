from dataclasses import dataclass, field
import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import API_BASE_URL
from .errors import DeserializationError, TransportError
from .tokens import AccessToken, Login

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10  # seconds

T = TypeVar("T")


@dataclass
class Pagination:
    """Query filters for list endpoints.

    Zero means "not set" for every field and is left out of the query.
    """

    # Epoch timestamp; only results that took place before it.
    # (when using time-based cursors)
    before: int = 0
    # Epoch timestamp; only results that took place after it.
    # (when using time-based cursors)
    after: int = 0
    # Page number (when using page-based cursors)
    page: int = 0
    # Number of items per page
    per_page: int = 30

    def as_query(self) -> list[tuple[str, int]]:
        query: list[tuple[str, int]] = []
        if self.before > 0:
            query.append(("before", self.before))
        if self.after > 0:
            query.append(("after", self.after))
        if self.page > 0:
            query.append(("page", self.page))
        if self.per_page > 0:
            query.append(("per_page", self.per_page))
        return query


@dataclass(frozen=True)
class Context:
    """Per-request identity: whose data the request reads."""

    access_token: AccessToken

    def __post_init__(self):
        object.__setattr__(self, "access_token", AccessToken.coerce(self.access_token))

    @classmethod
    def from_login(cls, login: Login) -> "Context":
        return cls(access_token=login.access_token)

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


def make_request(
    http: httpx.Client,
    method: str,
    url: str,
    *,
    error_cls: type[TransportError] = TransportError,
    **kwargs: Any,
) -> httpx.Response:
    """Send a single request and fail on anything but a 2xx response.

    Raises:
        TransportError (or `error_cls`): If no response arrives or its status
            is not 2xx. `status_code` is set when a response was received.
    """
    logger.debug(f"Sending {method} request to {url}")
    try:
        response = http.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        logger.error(
            f"{method} request to {url} failed: "
            f"exception_type={type(e).__name__}, error={e}"
        )
        raise error_cls(f"{method} {url} failed: {e}") from e

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(
            f"Strava API returned error for {method} {url}: "
            f"{response.status_code} {response.text}"
        )
        raise error_cls(
            f"{method} {url} returned status {response.status_code}: {response.text}",
            status_code=response.status_code,
        ) from e
    return response


def parse_response(
    response: httpx.Response,
    adapter: TypeAdapter[T],
    *,
    error_cls: type[DeserializationError] = DeserializationError,
) -> T:
    """Validate a JSON response body against `adapter`.

    Raises:
        DeserializationError (or `error_cls`): If the body is not JSON or does
            not match the expected shape.
    """
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        logger.error(
            f"Unexpected response body ({e.error_count()} errors): {response.text}"
        )
        raise error_cls(f"Unexpected response body: {e}") from e


@dataclass
class Api:
    """Authenticated GET requests against the Strava API.

    Holds no credentials: identity comes from the Context of each call. Pass
    `http` to share one `httpx.Client` with the auth flows; otherwise the Api
    creates its own and closes it in `close()`.
    """

    base_url: str = API_BASE_URL
    http: httpx.Client = field(default=None)  # type: ignore[assignment]
    _owns_http: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        if self.http is None:
            self.http = httpx.Client(timeout=DEFAULT_TIMEOUT)
            self._owns_http = True

    def get(self, path: str, context: Context) -> httpx.Response:
        return make_request(
            self.http,
            "GET",
            f"{self.base_url}{path}",
            headers=context.auth_headers(),
        )

    def get_paginated(
        self, path: str, context: Context, pagination: Pagination
    ) -> httpx.Response:
        return make_request(
            self.http,
            "GET",
            f"{self.base_url}{path}",
            params=pagination.as_query(),
            headers=context.auth_headers(),
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "Api":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

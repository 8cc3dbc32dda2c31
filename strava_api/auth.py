"""Strava OAuth flows: authorization code exchange, refresh and revocation.

Every flow sends exactly one request on the `httpx.Client` it is given and
performs no retries.
"""

from urllib.parse import urlencode
import logging

import httpx
from pydantic import TypeAdapter

from .client import make_request, parse_response
from .config import Config, DEAUTHORIZE_URL
from .errors import AuthDeserializationError, AuthTransportError
from .tokens import AccessToken, Login, RefreshToken

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = "read,activity:read_all"

login_adapter = TypeAdapter(Login)


def _exchange_token(
    client: httpx.Client, config: Config, body: dict[str, str]
) -> Login:
    response = make_request(
        client,
        "POST",
        config.token_url,
        json={
            "client_id": str(config.client_id),
            "client_secret": config.client_secret,
            **body,
        },
        error_cls=AuthTransportError,
    )
    return parse_response(response, login_adapter, error_cls=AuthDeserializationError)


def login(code: str, config: Config, client: httpx.Client) -> Login:
    """Exchange a Strava authorization code for a login session.

    Args:
        code: The code Strava appended to the redirect URI after authorization
        config: Client credentials and endpoints
        client: The HTTP client to send the request with

    Returns:
        Login: A new session containing both access_token and refresh_token

    Raises:
        AuthTransportError: If the request fails or returns a non-2xx status
        AuthDeserializationError: If the response body is not a valid token
    """
    session = _exchange_token(
        client, config, {"code": code, "grant_type": "authorization_code"}
    )
    logger.info(
        f"Exchanged authorization code for Strava login (expires_at={session.expires_at})"
    )
    return session


def refresh_token(
    token: RefreshToken | str, config: Config, client: httpx.Client
) -> Login:
    """Recreate a login session from a refresh token.

    Strava may rotate the refresh token; callers should persist the returned
    Login in place of the old one.

    Raises:
        AuthTransportError: If the request fails or returns a non-2xx status
        AuthDeserializationError: If the response body is not a valid token
    """
    token = RefreshToken.coerce(token)
    session = _exchange_token(
        client,
        config,
        {"refresh_token": str(token), "grant_type": "refresh_token"},
    )
    logger.info(f"Refreshed Strava access token (expires_at={session.expires_at})")
    return session


def deauthorize(
    access_token: AccessToken | str,
    client: httpx.Client,
    config: Config | None = None,
) -> None:
    """Revoke access to the application for the authenticated athlete.

    Raises:
        AuthTransportError: If the request fails or returns a non-2xx status
    """
    access_token = AccessToken.coerce(access_token)
    url = config.deauthorize_url if config is not None else DEAUTHORIZE_URL
    make_request(
        client,
        "POST",
        url,
        json={"access_token": str(access_token)},
        error_cls=AuthTransportError,
    )
    logger.info("Deauthorized Strava access token")


def build_oauth_authorize_url(
    config: Config,
    redirect_uri: str,
    scope: str = DEFAULT_SCOPE,
    state: str | None = None,
    approval_prompt: str = "auto",
) -> str:
    """Build the Strava authorization page URL.

    Strava redirects the athlete back to `redirect_uri` with a `code` query
    parameter, which `login` exchanges for tokens.
    """
    params = {
        "client_id": str(config.client_id),
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "approval_prompt": approval_prompt,
        "scope": scope,
    }
    if state is not None:
        params["state"] = state
    url = f"{config.oauth_url}?{urlencode(params)}"
    logger.debug(f"Building OAuth authorize URL: {url}")
    return url

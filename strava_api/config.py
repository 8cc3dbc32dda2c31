"""Client credentials and OAuth endpoints for the Strava API.

For local dev, credentials can live in a .env file; `Config.from_env` loads it
before reading the environment. Variables already set in the environment win
over the .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

API_BASE_URL = "https://www.strava.com/api/v3"
TOKEN_URL = "https://www.strava.com/oauth/token"
DEAUTHORIZE_URL = "https://www.strava.com/oauth/deauthorize"
OAUTH_URL = "https://www.strava.com/oauth/authorize"

ENV_PREFIX = "STRAVA_"


@dataclass(frozen=True)
class Config:
    client_id: int
    client_secret: str
    token_url: str = TOKEN_URL
    deauthorize_url: str = DEAUTHORIZE_URL
    oauth_url: str = OAUTH_URL

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> "Config":
        """Create a Config from environment variables.

        Requires the following environment variables to be set:
            STRAVA_CLIENT_ID      (number)
            STRAVA_CLIENT_SECRET  (string)

        STRAVA_TOKEN_URL, STRAVA_DEAUTHORIZE_URL and STRAVA_OAUTH_URL are
        optional and override the default Strava endpoints.

        Raises:
            ValueError: If a required variable is missing or malformed.
        """
        load_dotenv(dotenv_path)

        missing = [
            var
            for var in (f"{ENV_PREFIX}CLIENT_ID", f"{ENV_PREFIX}CLIENT_SECRET")
            if not os.getenv(var)
        ]
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        raw_client_id = os.environ[f"{ENV_PREFIX}CLIENT_ID"]
        try:
            client_id = int(raw_client_id)
        except ValueError:
            raise ValueError(
                f"Invalid {ENV_PREFIX}CLIENT_ID value: {raw_client_id!r}. Must be a number."
            ) from None

        return cls(
            client_id=client_id,
            client_secret=os.environ[f"{ENV_PREFIX}CLIENT_SECRET"],
            token_url=os.getenv(f"{ENV_PREFIX}TOKEN_URL", TOKEN_URL),
            deauthorize_url=os.getenv(f"{ENV_PREFIX}DEAUTHORIZE_URL", DEAUTHORIZE_URL),
            oauth_url=os.getenv(f"{ENV_PREFIX}OAUTH_URL", OAUTH_URL),
        )

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks.
        return f"Config(client_id={self.client_id}, token_url={self.token_url!r})"

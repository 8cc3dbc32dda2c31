from .client import Api, Context, parse_response
from .models import Athlete, athlete_adapter


def current(api: Api, context: Context) -> Athlete:
    """Return the currently logged in athlete.

    Identity corresponds to the access token passed in Context.
    """
    return parse_response(api.get("/athlete", context), athlete_adapter)

import logging

from .client import Api, Context, Pagination, parse_response
from .models import Activity, activity_adapter, activity_list_adapter

logger = logging.getLogger(__name__)

ACTIVITIES_PATH = "/athlete/activities"


def latest(api: Api, context: Context) -> list[Activity]:
    """Get the latest activities for the logged in athlete."""
    return parse_response(api.get(ACTIVITIES_PATH, context), activity_list_adapter)


def before(time: int, api: Api, context: Context) -> list[Activity]:
    """Get some activities that occurred prior to a given timestamp.

    Timestamp is given as seconds since epoch.
    """
    return _list(Pagination(before=time), api, context)


def after(time: int, api: Api, context: Context) -> list[Activity]:
    """Get some activities that occurred after a given timestamp.

    Timestamp is given as seconds since epoch.
    """
    return _list(Pagination(after=time), api, context)


def by_id(id: int, api: Api, context: Context) -> Activity:
    """Find a specific activity by its ID."""
    return parse_response(api.get(f"/activities/{id}", context), activity_adapter)


def _list(pagination: Pagination, api: Api, context: Context) -> list[Activity]:
    response = api.get_paginated(ACTIVITIES_PATH, context, pagination)
    activities = parse_response(response, activity_list_adapter)
    logger.debug(f"Received {len(activities)} activities for {pagination.as_query()}")
    return activities

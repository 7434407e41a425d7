"""
Low-level safety event fetching from the Terminal API.
"""
import logging

from fleethub_terminal.api import RequestContext
from fleethub_terminal.const import SAFETY_EVENTS_PATH
from fleethub_terminal.models import ApiResponse, SafetyEvent

_LOGGER = logging.getLogger(__name__)


async def fetch_safety_events(ctx: RequestContext) -> ApiResponse[SafetyEvent]:
    """
    Fetch all safety events.

    Corresponding CURL command:
    curl -X 'GET' '<base>/safety/events'
    """
    raw_json = await ctx.get_json(SAFETY_EVENTS_PATH)
    response = ApiResponse.from_json(raw_json, SafetyEvent.from_json)
    _LOGGER.debug("Fetched %s safety events", len(response.data))
    return response

"""
Low-level hours-of-service fetching from the Terminal API.
"""
import logging

from fleethub_terminal.api import RequestContext
from fleethub_terminal.const import HOS_AVAILABLE_TIME_PATH
from fleethub_terminal.models import ApiResponse, HOSStatus

_LOGGER = logging.getLogger(__name__)


async def fetch_hos_available_time(ctx: RequestContext) -> ApiResponse[HOSStatus]:
    """
    Fetch the remaining drive/shift/cycle time for every driver.

    Values are returned exactly as decoded; any rounding is left to display code.

    Corresponding CURL command:
    curl -X 'GET' '<base>/hos/available-time'
    """
    raw_json = await ctx.get_json(HOS_AVAILABLE_TIME_PATH)
    response = ApiResponse.from_json(raw_json, HOSStatus.from_json)
    _LOGGER.debug("Fetched HOS status for %s drivers", len(response.data))
    return response

"""
Low-level driver data fetching from the Terminal API.

Responsible for:
- Fetching the driver list
- Fetching a single driver by id
"""
import logging

from fleethub_terminal.api import RequestContext
from fleethub_terminal.const import DRIVERS_PATH
from fleethub_terminal.models import ApiResponse, Driver, unwrap_record

_LOGGER = logging.getLogger(__name__)


async def fetch_drivers(ctx: RequestContext) -> ApiResponse[Driver]:
    """
    Fetch all drivers.

    Corresponding CURL command:
    curl -X 'GET' '<base>/drivers'
    """
    raw_json = await ctx.get_json(DRIVERS_PATH)
    response = ApiResponse.from_json(raw_json, Driver.from_json)
    _LOGGER.debug("Fetched %s drivers", len(response.data))
    return response


async def fetch_driver(ctx: RequestContext, driver_id: str) -> Driver:
    """
    Fetch one driver and return the record itself, not the envelope.

    The id is sent as given; the service decides whether it is valid.

    Corresponding CURL command:
    curl -X 'GET' '<base>/drivers/<id>'
    """
    raw_json = await ctx.get_json(DRIVERS_PATH, driver_id)
    return unwrap_record(raw_json, Driver.from_json)

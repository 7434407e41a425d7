"""
Low-level provider connection fetching from the Terminal API.
"""
import logging

from fleethub_terminal.api import RequestContext
from fleethub_terminal.const import CONNECTIONS_PATH
from fleethub_terminal.models import ApiResponse, Connection

_LOGGER = logging.getLogger(__name__)


async def fetch_connections(ctx: RequestContext) -> ApiResponse[Connection]:
    """
    Fetch every telematics provider connection on the account.

    Corresponding CURL command:
    curl -X 'GET' '<base>/connections'
    """
    raw_json = await ctx.get_json(CONNECTIONS_PATH)
    response = ApiResponse.from_json(raw_json, Connection.from_json)
    _LOGGER.debug("Fetched %s connections", len(response.data))
    return response

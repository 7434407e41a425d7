"""
Low-level vehicle and vehicle location fetching from the Terminal API.

Responsible for:
- Fetching the vehicle list
- Fetching a single vehicle by id
- Fetching the latest known location of every vehicle
"""
import logging

from fleethub_terminal.api import RequestContext
from fleethub_terminal.const import VEHICLES_PATH, VEHICLE_LOCATIONS_PATH
from fleethub_terminal.models import ApiResponse, Vehicle, VehicleLocation, unwrap_record

_LOGGER = logging.getLogger(__name__)


async def fetch_vehicles(ctx: RequestContext) -> ApiResponse[Vehicle]:
    """
    Fetch all vehicles.

    Corresponding CURL command:
    curl -X 'GET' '<base>/vehicles'
    """
    raw_json = await ctx.get_json(VEHICLES_PATH)
    response = ApiResponse.from_json(raw_json, Vehicle.from_json)
    _LOGGER.debug("Fetched %s vehicles", len(response.data))
    return response


async def fetch_vehicle(ctx: RequestContext, vehicle_id: str) -> Vehicle:
    """
    Fetch one vehicle and return the record itself, not the envelope.

    Corresponding CURL command:
    curl -X 'GET' '<base>/vehicles/<id>'
    """
    raw_json = await ctx.get_json(VEHICLES_PATH, vehicle_id)
    return unwrap_record(raw_json, Vehicle.from_json)


async def fetch_vehicle_locations(ctx: RequestContext) -> ApiResponse[VehicleLocation]:
    """
    Fetch the latest known location for every vehicle.

    Corresponding CURL command:
    curl -X 'GET' '<base>/vehicles/locations'
    """
    raw_json = await ctx.get_json(VEHICLE_LOCATIONS_PATH)
    response = ApiResponse.from_json(raw_json, VehicleLocation.from_json)
    _LOGGER.debug("Fetched %s vehicle locations", len(response.data))
    return response

"""
TerminalApi: async client for the normalized Terminal fleet API.

One method per resource; each method is exactly one GET against the base URL.
The client does no retrying, caching or input validation, and every failure
propagates to the caller as a TerminalApiError subclass.
"""
from __future__ import annotations

import logging

import aiohttp

from .api import RequestContext
from .api.connections import fetch_connections
from .api.drivers import fetch_driver, fetch_drivers
from .api.hos import fetch_hos_available_time
from .api.safety import fetch_safety_events
from .api.vehicles import fetch_vehicle, fetch_vehicle_locations, fetch_vehicles
from .const import API_BASE_URL, REQUEST_TIMEOUT
from .models import (
    ApiResponse,
    Connection,
    Driver,
    HOSStatus,
    SafetyEvent,
    Vehicle,
    VehicleLocation,
)

_LOGGER = logging.getLogger(__name__)


class TerminalApi:
    """
    Client for the Terminal API.

    A session passed in by the caller is borrowed and never closed here;
    otherwise one is created on first use and closed by close().
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float | None = REQUEST_TIMEOUT,
        strict_status: bool = False,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.strict_status = strict_status
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> TerminalApi:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _context(self) -> RequestContext:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return RequestContext(
            session=self._session,
            base_url=self.base_url,
            timeout=self.timeout,
            strict_status=self.strict_status,
        )

    async def close(self) -> None:
        """Close the session if this client created it."""
        if not self._owns_session:
            return
        if self._session is not None and not self._session.closed:
            await self._session.close()
            _LOGGER.debug("Closed Terminal API session")
        self._session = None

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    async def get_connections(self) -> ApiResponse[Connection]:
        return await fetch_connections(self._context())

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------

    async def get_drivers(self) -> ApiResponse[Driver]:
        return await fetch_drivers(self._context())

    async def get_driver(self, driver_id: str) -> Driver:
        return await fetch_driver(self._context(), driver_id)

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    async def get_vehicles(self) -> ApiResponse[Vehicle]:
        return await fetch_vehicles(self._context())

    async def get_vehicle(self, vehicle_id: str) -> Vehicle:
        return await fetch_vehicle(self._context(), vehicle_id)

    async def get_vehicle_locations(self) -> ApiResponse[VehicleLocation]:
        return await fetch_vehicle_locations(self._context())

    # ------------------------------------------------------------------
    # Safety events
    # ------------------------------------------------------------------

    async def get_safety_events(self) -> ApiResponse[SafetyEvent]:
        return await fetch_safety_events(self._context())

    # ------------------------------------------------------------------
    # Hours of service
    # ------------------------------------------------------------------

    async def get_hos_available_time(self) -> ApiResponse[HOSStatus]:
        return await fetch_hos_available_time(self._context())

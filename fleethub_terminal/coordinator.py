"""
DashboardCoordinator: owns the dashboard's fleet data for one session.

Responsibilities:
- Own the single TerminalApi instance for the lifetime of the session.
- Run the initial batch: drivers, vehicles, safety events and HOS status are
  fetched concurrently and applied all-or-nothing.
- Refresh connections and vehicle locations through their own tiers, outside
  the initial batch.
- Push DashboardData snapshots to listeners as each one is published.
- Stop publishing once shut down, so late responses are dropped.
"""
from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Callable

from .client import TerminalApi
from .coordinator_data import DashboardData, LoadState
from .models import Driver, Vehicle

__all__ = ["DashboardCoordinator", "DashboardData", "LoadState"]

_LOGGER = logging.getLogger(__name__)

Listener = Callable[[DashboardData], None]


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__


class DashboardCoordinator:
    """
    Coordinator for the fleet dashboard.

    The snapshot starts empty with state NOT_LOADED. Only this class replaces
    it; readers get the current frozen snapshot through ``data`` or receive
    each new one by registering a listener.
    """

    def __init__(self, api: TerminalApi | None = None) -> None:
        self.api = api if api is not None else TerminalApi()
        self._data = DashboardData()
        self._listeners: list[Listener] = []
        self._load_task: asyncio.Task | None = None
        self._closed: bool = False

    # ------------------------------------------------------------------
    # Snapshot access
    # ------------------------------------------------------------------

    @property
    def data(self) -> DashboardData:
        return self._data

    @property
    def closed(self) -> bool:
        return self._closed

    def async_add_listener(self, listener: Listener) -> Callable[[], None]:
        """Register a callback for new snapshots. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def remove_listener() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove_listener

    def _publish(self, new_data: DashboardData) -> None:
        """Replace the snapshot and notify listeners. Dropped after shutdown."""
        if self._closed:
            _LOGGER.debug("Coordinator is shut down, dropping snapshot")
            return
        self._data = new_data
        for listener in list(self._listeners):
            try:
                listener(new_data)
            except Exception:  # noqa: BLE001
                _LOGGER.exception("Dashboard listener %s failed", listener)

    # ------------------------------------------------------------------
    # Initial batch: drivers, vehicles, safety events, HOS
    # ------------------------------------------------------------------

    async def async_load(self) -> DashboardData:
        """
        Load the four dashboard collections and return the resulting snapshot.

        A call made while a load is already running waits for that load
        instead of starting a second batch. Failures are logged and recorded
        on the snapshot; they are never raised from here.
        """
        if self._closed:
            _LOGGER.warning("Load requested after shutdown, ignoring")
            return self._data

        if self._load_task is None or self._load_task.done():
            self._load_task = asyncio.ensure_future(self._run_initial_batch())
        else:
            _LOGGER.debug("Load already in flight, joining it")

        task = self._load_task
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            # Abandoned by async_shutdown(); anything else is our caller being cancelled
            if not (self._closed and task.cancelled()):
                raise
        return self._data

    async def _run_initial_batch(self) -> None:
        """Fetch the four collections concurrently and apply them together."""
        self._publish(dataclasses.replace(self._data, state=LoadState.LOADING, loading=True))

        outcome: dict = {}
        try:
            results = await asyncio.gather(
                self.api.get_drivers(),
                self.api.get_vehicles(),
                self.api.get_safety_events(),
                self.api.get_hos_available_time(),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result

            drivers_res, vehicles_res, safety_res, hos_res = results
            outcome = dict(
                drivers=drivers_res.data,
                vehicles=vehicles_res.data,
                safety_events=safety_res.data,
                hos_status=hos_res.data,
                state=LoadState.LOADED,
                last_error=None,
            )
            _LOGGER.debug(
                "Loaded %s drivers, %s vehicles, %s safety events, %s HOS entries",
                len(drivers_res.data), len(vehicles_res.data),
                len(safety_res.data), len(hos_res.data),
            )
        except asyncio.CancelledError:
            _LOGGER.debug("Initial batch cancelled")
            raise
        except Exception as exc:  # noqa: BLE001
            _LOGGER.error("Error loading data: %s", _describe(exc))
            outcome = dict(state=LoadState.LOAD_FAILED, last_error=_describe(exc))
        finally:
            self._publish(dataclasses.replace(self._data, loading=False, **outcome))

    # ------------------------------------------------------------------
    # Decoupled tiers: connections, vehicle locations
    # ------------------------------------------------------------------

    async def async_refresh_connections(self) -> None:
        """Fetch provider connections and replace that collection on success."""
        if self._closed:
            return
        try:
            response = await self.api.get_connections()
        except Exception as exc:  # noqa: BLE001
            _LOGGER.warning("Failed to fetch connections: %s", _describe(exc))
            return
        self._publish(dataclasses.replace(self._data, connections=response.data))

    async def async_refresh_vehicle_locations(self) -> None:
        """Fetch the latest vehicle locations and replace that collection on success."""
        if self._closed:
            return
        try:
            response = await self.api.get_vehicle_locations()
        except Exception as exc:  # noqa: BLE001
            _LOGGER.warning("Failed to fetch vehicle locations: %s", _describe(exc))
            return
        self._publish(dataclasses.replace(self._data, vehicle_locations=response.data))

    # ------------------------------------------------------------------
    # Single-record lookups
    # ------------------------------------------------------------------

    async def async_get_driver(self, driver_id: str) -> Driver:
        return await self.api.get_driver(driver_id)

    async def async_get_vehicle(self, vehicle_id: str) -> Vehicle:
        return await self.api.get_vehicle(vehicle_id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def async_shutdown(self) -> None:
        """Stop publishing, abandon any in-flight load and close the client."""
        self._closed = True
        task = self._load_task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self._load_task = None
        self._listeners.clear()
        await self.api.close()

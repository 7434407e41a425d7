"""
DashboardData: immutable snapshot of all fleet data shown on the dashboard.

This is a pure data module with no network dependencies.
"""
from __future__ import annotations

import dataclasses
import enum

from .models import Connection, Driver, HOSStatus, SafetyEvent, Vehicle, VehicleLocation


class LoadState(str, enum.Enum):
    """Where the initial batch load stands."""

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"


@dataclasses.dataclass(frozen=True)
class DashboardData:
    """
    Typed, copy-on-write snapshot of all fleet data.

    Always replace via dataclasses.replace(); never mutate in place.
    """

    # Initial batch: refreshed together or not at all
    drivers: list[Driver] = dataclasses.field(default_factory=list)
    vehicles: list[Vehicle] = dataclasses.field(default_factory=list)
    safety_events: list[SafetyEvent] = dataclasses.field(default_factory=list)
    hos_status: list[HOSStatus] = dataclasses.field(default_factory=list)

    # Fetched by their own call sites, outside the initial batch
    connections: list[Connection] = dataclasses.field(default_factory=list)
    vehicle_locations: list[VehicleLocation] = dataclasses.field(default_factory=list)

    state: LoadState = LoadState.NOT_LOADED
    loading: bool = False

    # Description of the most recent failed batch, None after a success
    last_error: str | None = None

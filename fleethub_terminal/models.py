"""
Domain models for the FleetHub Terminal client.

This module contains pure data classes representing Terminal API entities.
These classes have no dependencies on HTTP or coordinator logic.

Each record is built from the camelCase JSON the service returns through its
``from_json`` class method. Enumerated fields are stored as the service sent
them; a missing required key raises ApiDecodeError.
"""
from __future__ import annotations

import dataclasses
from typing import Callable, Generic, TypeVar

from .requests import ApiDecodeError

T = TypeVar("T")


def _required(raw: dict, key: str, record: str):
    """Return raw[key], raising ApiDecodeError when the record is not a dict or the key is missing."""
    if not isinstance(raw, dict):
        raise ApiDecodeError(f"{record} must be an object, got {type(raw).__name__}")
    try:
        return raw[key]
    except KeyError:
        raise ApiDecodeError(f"{record} is missing required field '{key}'") from None


@dataclasses.dataclass(frozen=True)
class Driver:
    """Representation of a single driver."""

    id: str
    first_name: str
    last_name: str
    license_number: str
    license_state: str
    status: str
    email: str | None = None
    phone: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_json(cls, raw: dict) -> Driver:
        return cls(
            id=_required(raw, "id", "Driver"),
            first_name=_required(raw, "firstName", "Driver"),
            last_name=_required(raw, "lastName", "Driver"),
            license_number=_required(raw, "licenseNumber", "Driver"),
            license_state=_required(raw, "licenseState", "Driver"),
            status=_required(raw, "status", "Driver"),
            email=raw.get("email"),
            phone=raw.get("phone"),
        )


@dataclasses.dataclass(frozen=True)
class Vehicle:
    """Representation of a single vehicle."""

    id: str
    name: str
    vin: str
    make: str
    model: str
    year: int
    status: str | None = None

    @classmethod
    def from_json(cls, raw: dict) -> Vehicle:
        return cls(
            id=_required(raw, "id", "Vehicle"),
            name=_required(raw, "name", "Vehicle"),
            vin=_required(raw, "vin", "Vehicle"),
            make=_required(raw, "make", "Vehicle"),
            model=_required(raw, "model", "Vehicle"),
            year=_required(raw, "year", "Vehicle"),
            status=raw.get("status"),
        )


@dataclasses.dataclass(frozen=True)
class VehicleLocation:
    """Latest known location of a vehicle."""

    vehicle_id: str
    latitude: float
    longitude: float
    timestamp: str
    address: str | None = None
    speed: float | None = None
    heading: float | None = None

    @classmethod
    def from_json(cls, raw: dict) -> VehicleLocation:
        return cls(
            vehicle_id=_required(raw, "vehicleId", "VehicleLocation"),
            latitude=_required(raw, "latitude", "VehicleLocation"),
            longitude=_required(raw, "longitude", "VehicleLocation"),
            timestamp=_required(raw, "timestamp", "VehicleLocation"),
            address=raw.get("address"),
            speed=raw.get("speed"),
            heading=raw.get("heading"),
        )


@dataclasses.dataclass(frozen=True)
class EventLocation:
    """Where a safety event happened."""

    latitude: float
    longitude: float
    address: str | None = None

    @classmethod
    def from_json(cls, raw: dict) -> EventLocation:
        return cls(
            latitude=_required(raw, "latitude", "EventLocation"),
            longitude=_required(raw, "longitude", "EventLocation"),
            address=raw.get("address"),
        )


@dataclasses.dataclass(frozen=True)
class SafetyEvent:
    """
    Representation of a single safety event.

    driver_id and vehicle_id are not checked against the driver or vehicle
    lists; an event may reference records the service did not return.
    """

    id: str
    type: str
    severity: str
    driver_id: str
    vehicle_id: str
    timestamp: str
    location: EventLocation | None = None

    @classmethod
    def from_json(cls, raw: dict) -> SafetyEvent:
        location = raw.get("location") if isinstance(raw, dict) else None
        return cls(
            id=_required(raw, "id", "SafetyEvent"),
            type=_required(raw, "type", "SafetyEvent"),
            severity=_required(raw, "severity", "SafetyEvent"),
            driver_id=_required(raw, "driverId", "SafetyEvent"),
            vehicle_id=_required(raw, "vehicleId", "SafetyEvent"),
            timestamp=_required(raw, "timestamp", "SafetyEvent"),
            location=EventLocation.from_json(location) if location is not None else None,
        )


@dataclasses.dataclass(frozen=True)
class HOSStatus:
    """Hours-of-service clocks for one driver. Remaining times are in hours."""

    driver_id: str
    drive_time_remaining: float
    shift_time_remaining: float
    status: str
    last_updated: str
    cycle_time_remaining: float | None = None

    @classmethod
    def from_json(cls, raw: dict) -> HOSStatus:
        return cls(
            driver_id=_required(raw, "driverId", "HOSStatus"),
            drive_time_remaining=_required(raw, "driveTimeRemaining", "HOSStatus"),
            shift_time_remaining=_required(raw, "shiftTimeRemaining", "HOSStatus"),
            status=_required(raw, "status", "HOSStatus"),
            last_updated=_required(raw, "lastUpdated", "HOSStatus"),
            cycle_time_remaining=raw.get("cycleTimeRemaining"),
        )


@dataclasses.dataclass(frozen=True)
class Connection:
    """A link between the Terminal account and a telematics provider."""

    id: str
    provider: str
    status: str
    company_name: str
    created_at: str

    @classmethod
    def from_json(cls, raw: dict) -> Connection:
        return cls(
            id=_required(raw, "id", "Connection"),
            provider=_required(raw, "provider", "Connection"),
            status=_required(raw, "status", "Connection"),
            company_name=_required(raw, "companyName", "Connection"),
            created_at=_required(raw, "createdAt", "Connection"),
        )


@dataclasses.dataclass(frozen=True)
class Pagination:
    """Paging hint carried by list responses. Decoded but never followed."""

    has_more: bool
    cursor: str | None = None

    @classmethod
    def from_json(cls, raw: dict) -> Pagination:
        has_more = _required(raw, "hasMore", "Pagination")
        if not isinstance(has_more, bool):
            raise ApiDecodeError(f"Pagination.hasMore must be a boolean, got {has_more!r}")
        return cls(has_more=has_more, cursor=raw.get("cursor"))


@dataclasses.dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """The {data, pagination?} envelope every list endpoint returns."""

    data: list[T] = dataclasses.field(default_factory=list)
    pagination: Pagination | None = None

    @classmethod
    def from_json(cls, raw: dict, parse_item: Callable[[dict], T]) -> ApiResponse[T]:
        items = _required(raw, "data", "Response envelope")
        if not isinstance(items, list):
            raise ApiDecodeError(
                f"Response envelope 'data' must be a list, got {type(items).__name__}"
            )
        pagination = raw.get("pagination")
        return cls(
            data=[parse_item(item) for item in items],
            pagination=Pagination.from_json(pagination) if pagination is not None else None,
        )


def unwrap_record(raw: dict, parse_item: Callable[[dict], T]) -> T:
    """Return the single record held in a {data: record} response."""
    return parse_item(_required(raw, "data", "Response envelope"))

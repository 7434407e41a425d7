"""
Tests for decoding Terminal API JSON into model instances.
"""

from __future__ import annotations

import dataclasses
import unittest

from fleethub_terminal.models import (
    ApiResponse,
    Connection,
    Driver,
    HOSStatus,
    SafetyEvent,
    Vehicle,
    VehicleLocation,
    unwrap_record,
)
from fleethub_terminal.requests import ApiDecodeError

from .test_common import (
    envelope,
    make_connection_json,
    make_driver_json,
    make_hos_json,
    make_location_json,
    make_safety_event_json,
    make_vehicle_json,
)


class TestRecords(unittest.TestCase):

    def test_driver_maps_camel_case_fields(self):
        driver = Driver.from_json(make_driver_json("d1", email="ana@example.com"))
        self.assertEqual(driver.id, "d1")
        self.assertEqual(driver.first_name, "Ana")
        self.assertEqual(driver.last_name, "Lee")
        self.assertEqual(driver.license_number, "L1")
        self.assertEqual(driver.license_state, "CA")
        self.assertEqual(driver.status, "active")
        self.assertEqual(driver.email, "ana@example.com")
        self.assertIsNone(driver.phone)
        self.assertEqual(driver.full_name, "Ana Lee")

    def test_vehicle_optional_status(self):
        vehicle = Vehicle.from_json(make_vehicle_json("v1"))
        self.assertIsNone(vehicle.status)
        self.assertEqual(vehicle.year, 2021)

    def test_vehicle_location(self):
        location = VehicleLocation.from_json(make_location_json("v1", speed=55.5, heading=270))
        self.assertEqual(location.vehicle_id, "v1")
        self.assertEqual(location.speed, 55.5)
        self.assertEqual(location.heading, 270)
        self.assertIsNone(location.address)

    def test_safety_event_with_location(self):
        event = SafetyEvent.from_json(make_safety_event_json(
            "e1", location={"latitude": 1.5, "longitude": 2.5, "address": "Main St"},
        ))
        self.assertEqual(event.location.latitude, 1.5)
        self.assertEqual(event.location.address, "Main St")

    def test_safety_event_dangling_references_are_kept(self):
        event = SafetyEvent.from_json(make_safety_event_json(driverId="ghost", vehicleId="nowhere"))
        self.assertEqual(event.driver_id, "ghost")
        self.assertEqual(event.vehicle_id, "nowhere")

    def test_safety_event_type_is_free_form(self):
        event = SafetyEvent.from_json(make_safety_event_json(type="lane_departure_warning"))
        self.assertEqual(event.type, "lane_departure_warning")

    def test_hos_keeps_untruncated_float(self):
        hos = HOSStatus.from_json(make_hos_json(driveTimeRemaining=3.25))
        self.assertEqual(hos.drive_time_remaining, 3.25)
        self.assertIsNone(hos.cycle_time_remaining)

    def test_connection(self):
        connection = Connection.from_json(make_connection_json())
        self.assertEqual(connection.company_name, "Acme Freight")
        self.assertEqual(connection.created_at, "2024-01-01T00:00:00Z")

    def test_missing_required_field_is_decode_error(self):
        raw = make_driver_json()
        del raw["licenseNumber"]
        with self.assertRaises(ApiDecodeError):
            Driver.from_json(raw)

    def test_non_object_record_is_decode_error(self):
        with self.assertRaises(ApiDecodeError):
            Vehicle.from_json("v1")

    def test_records_are_frozen(self):
        driver = Driver.from_json(make_driver_json())
        with self.assertRaises(dataclasses.FrozenInstanceError):
            driver.status = "inactive"


class TestEnvelope(unittest.TestCase):

    def test_preserves_order(self):
        raw = envelope(make_driver_json("d2"), make_driver_json("d1"), make_driver_json("d3"))
        response = ApiResponse.from_json(raw, Driver.from_json)
        self.assertEqual([d.id for d in response.data], ["d2", "d1", "d3"])
        self.assertIsNone(response.pagination)

    def test_pagination_is_decoded(self):
        raw = envelope(pagination={"hasMore": True, "cursor": "abc"})
        response = ApiResponse.from_json(raw, Driver.from_json)
        self.assertTrue(response.pagination.has_more)
        self.assertEqual(response.pagination.cursor, "abc")

    def test_pagination_has_more_false(self):
        raw = envelope(pagination={"hasMore": False})
        response = ApiResponse.from_json(raw, Driver.from_json)
        self.assertIs(response.pagination.has_more, False)
        self.assertIsNone(response.pagination.cursor)

    def test_pagination_has_more_must_be_boolean(self):
        for value in ("false", 0, None):
            with self.subTest(value=value), self.assertRaises(ApiDecodeError):
                ApiResponse.from_json(envelope(pagination={"hasMore": value}), Driver.from_json)

    def test_missing_data_is_decode_error(self):
        with self.assertRaises(ApiDecodeError):
            ApiResponse.from_json({"error": "not found"}, Driver.from_json)

    def test_data_must_be_a_list(self):
        with self.assertRaises(ApiDecodeError):
            ApiResponse.from_json({"data": {"id": "d1"}}, Driver.from_json)

    def test_body_must_be_an_object(self):
        with self.assertRaises(ApiDecodeError):
            ApiResponse.from_json([], Driver.from_json)

    def test_unwrap_record_returns_record(self):
        driver = unwrap_record({"data": make_driver_json("d7")}, Driver.from_json)
        self.assertIsInstance(driver, Driver)
        self.assertEqual(driver.id, "d7")

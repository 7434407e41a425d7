"""
Tests for the offline Postman collection parser and its artifacts.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

from fleethub_terminal.collection import (
    CollectionFormatError,
    load_collection,
    parse_collection,
    render_summary,
    write_artifacts,
)
from fleethub_terminal.collection.mappings import SAMBASAFETY_INTEGRATION, VERIZON_CONNECT_MAPPING

from .test_common import make_collection


class TestParseCollection(unittest.TestCase):

    def setUp(self):
        self.parsed = parse_collection(make_collection())

    def test_catalog_header(self):
        self.assertEqual(self.parsed.catalog["name"], "Terminal API")
        self.assertEqual(self.parsed.catalog["version"], "1.0")
        self.assertEqual(self.parsed.catalog["baseUrl"], "https://api.terminal.co")

    def test_categories_are_kept_even_when_empty(self):
        names = [c["name"] for c in self.parsed.categories]
        self.assertEqual(names, ["Drivers", "Passthrough", "Empty"])
        self.assertEqual(self.parsed.categories[2]["endpoints"], [])
        self.assertEqual(self.parsed.categories[1]["description"], "")

    def test_items_without_request_are_skipped(self):
        self.assertEqual(len(self.parsed.categories[0]["endpoints"]), 2)
        self.assertEqual(len(self.parsed.endpoints), 3)

    def test_path_and_parameters(self):
        list_drivers, get_driver = self.parsed.categories[0]["endpoints"]
        self.assertEqual(list_drivers["path"], "/drivers")
        self.assertEqual(get_driver["path"], "/drivers/:id")

        query = list_drivers["parameters"]["query"]
        self.assertEqual(query[0], {"key": "limit", "description": "Page size", "required": True, "example": "100"})
        self.assertFalse(query[1]["required"])

        self.assertEqual(
            get_driver["parameters"]["path"],
            [{"key": "id", "description": "Driver id", "example": "drv_1"}],
        )
        self.assertEqual(list_drivers["parameters"]["headers"][0]["key"], "Connection-Token")

    def test_body(self):
        list_drivers = self.parsed.categories[0]["endpoints"][0]
        proxy = self.parsed.categories[1]["endpoints"][0]
        self.assertIsNone(list_drivers["body"])
        self.assertEqual(proxy["body"]["mode"], "raw")

    def test_endpoint_list(self):
        self.assertEqual(
            self.parsed.endpoints[0],
            {"category": "Drivers", "name": "List Drivers", "method": "GET", "path": "/drivers"},
        )

    def test_static_mappings_are_attached(self):
        self.assertEqual(self.parsed.verizon_connect_mapping, VERIZON_CONNECT_MAPPING)
        self.assertEqual(len(self.parsed.verizon_connect_mapping), 5)
        self.assertEqual(len(self.parsed.sambasafety_integration), 3)
        self.assertEqual(self.parsed.sambasafety_integration, SAMBASAFETY_INTEGRATION)

    def test_missing_item_list(self):
        with self.assertRaises(CollectionFormatError):
            parse_collection({"info": {}})


class TestSummary(unittest.TestCase):

    def test_markdown_sections(self):
        parsed = parse_collection(make_collection())
        text = render_summary(parsed, datetime(2024, 5, 1, tzinfo=timezone.utc))

        self.assertTrue(text.startswith("# Terminal API Summary\n"))
        self.assertIn("**Generated**: 2024-05-01T00:00:00.000Z", text)
        self.assertIn("**Total Categories**: 3", text)
        self.assertIn("**Total Endpoints**: 3", text)
        self.assertIn("## Drivers\n\nDriver endpoints\n", text)
        self.assertIn("### List Drivers", text)
        self.assertIn("- **Method**: `GET`", text)
        self.assertIn("- **Path**: `/drivers/:id`", text)
        self.assertIn("- `limit` (required): Page size", text)
        self.assertIn("- `cursor`: ", text)
        self.assertIn("**Path Parameters**:\n- `id`: Driver id", text)

    def test_generated_timestamp_is_utc_with_milliseconds(self):
        parsed = parse_collection(make_collection())
        offset = timezone(timedelta(hours=2))
        text = render_summary(parsed, datetime(2024, 5, 1, 14, 30, 5, 123456, tzinfo=offset))
        self.assertIn("**Generated**: 2024-05-01T12:30:05.123Z\n", text)


class TestArtifacts(unittest.TestCase):

    def test_writes_all_files(self):
        parsed = parse_collection(make_collection())
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "nested" / "api-collection"
            written = write_artifacts(parsed, out)

            names = sorted(p.name for p in written)
            self.assertEqual(names, sorted([
                "parsed-collection.json",
                "endpoint-list.json",
                "verizon-connect-mapping.json",
                "sambasafety-integration.json",
                "API_SUMMARY.md",
            ]))
            catalog = json.loads((out / "parsed-collection.json").read_text(encoding="utf-8"))
            self.assertEqual(len(catalog["categories"]), 3)
            endpoints = json.loads((out / "endpoint-list.json").read_text(encoding="utf-8"))
            self.assertEqual(len(endpoints), 3)
            samba = json.loads((out / "sambasafety-integration.json").read_text(encoding="utf-8"))
            self.assertIn("→", samba[0]["dataFlow"])

    def test_load_collection_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "terminal.postman_collection.json"
            path.write_text(json.dumps(make_collection()), encoding="utf-8")
            parsed = load_collection(path)
        self.assertEqual(len(parsed.endpoints), 3)

    def test_load_collection_rejects_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(CollectionFormatError):
                load_collection(path)

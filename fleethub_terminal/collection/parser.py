"""
Parsing of a Postman collection document into the Terminal API catalog.

Responsible for:
- Loading the collection JSON from disk
- Mapping each category and endpoint onto catalog entries
- Building the flat endpoint list
"""
from __future__ import annotations

import copy
import dataclasses
import json
import logging
from pathlib import Path

from .mappings import SAMBASAFETY_INTEGRATION, VERIZON_CONNECT_MAPPING

_LOGGER = logging.getLogger(__name__)

CATALOG_NAME = "Terminal API"
CATALOG_VERSION = "1.0"
CATALOG_BASE_URL = "https://api.terminal.co"


class CollectionFormatError(ValueError):
    """Raised when the document is not a Postman collection."""


@dataclasses.dataclass
class ParsedCollection:
    catalog: dict
    endpoints: list[dict]
    verizon_connect_mapping: list[dict] = dataclasses.field(
        default_factory=lambda: copy.deepcopy(VERIZON_CONNECT_MAPPING)
    )
    sambasafety_integration: list[dict] = dataclasses.field(
        default_factory=lambda: copy.deepcopy(SAMBASAFETY_INTEGRATION)
    )

    @property
    def categories(self) -> list[dict]:
        return self.catalog["categories"]


def _content(value) -> str:
    """Postman descriptions are either {content: ...} objects or absent."""
    if isinstance(value, dict):
        return value.get("content") or ""
    return ""


def _parse_endpoint(endpoint: dict) -> dict | None:
    """Map one collection item onto a catalog endpoint. Items without a request are skipped."""
    request = endpoint.get("request")
    if not request:
        return None

    url = request.get("url") or {}
    if isinstance(url, str):
        # Postman allows a bare URL string; it carries no path segments
        url = {}

    body = request.get("body")
    return {
        "name": endpoint.get("name"),
        "description": _content(request.get("description")),
        "method": request.get("method"),
        "path": "/" + "/".join(url.get("path") or []),
        "parameters": {
            "query": [
                {
                    "key": q.get("key"),
                    "description": _content(q.get("description")),
                    "required": not q.get("disabled", False),
                    "example": q.get("value"),
                }
                for q in url.get("query") or []
            ],
            "path": [
                {
                    "key": v.get("key"),
                    "description": v.get("description") or "",
                    "example": v.get("value"),
                }
                for v in url.get("variable") or []
            ],
            "headers": [
                {
                    "key": h.get("key"),
                    "value": h.get("value"),
                    "description": h.get("description") or "",
                }
                for h in request.get("header") or []
            ],
        },
        "body": {
            "mode": body.get("mode"),
            "raw": body.get("raw"),
            "options": body.get("options"),
        } if body else None,
        "responses": endpoint.get("response") or [],
    }


def parse_collection(document: dict) -> ParsedCollection:
    """Build the catalog and endpoint list from a loaded collection document."""
    if not isinstance(document, dict) or not isinstance(document.get("item"), list):
        raise CollectionFormatError("Collection document has no 'item' list")

    catalog = {
        "name": CATALOG_NAME,
        "version": CATALOG_VERSION,
        "baseUrl": CATALOG_BASE_URL,
        "categories": [],
    }
    endpoint_list: list[dict] = []

    for category in document["item"]:
        _LOGGER.info("Processing category: %s", category.get("name"))
        category_data = {
            "name": category.get("name"),
            "description": _content(category.get("description")),
            "endpoints": [],
        }

        for endpoint in category.get("item") or []:
            endpoint_data = _parse_endpoint(endpoint)
            if endpoint_data is None:
                continue
            category_data["endpoints"].append(endpoint_data)
            endpoint_list.append({
                "category": category.get("name"),
                "name": endpoint_data["name"],
                "method": endpoint_data["method"],
                "path": endpoint_data["path"],
            })
            _LOGGER.debug("  %s %s", endpoint_data["method"], endpoint_data["path"])

        catalog["categories"].append(category_data)

    return ParsedCollection(catalog=catalog, endpoints=endpoint_list)


def load_collection(path: str | Path) -> ParsedCollection:
    """Read a collection file and parse it."""
    path = Path(path)
    _LOGGER.info("Loading Terminal Postman collection from %s", path)
    with path.open(encoding="utf-8") as f:
        try:
            document = json.load(f)
        except ValueError as e:
            raise CollectionFormatError(f"{path} is not valid JSON: {e}") from e
    return parse_collection(document)

"""
Writing the parsed collection artifacts to disk.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from .parser import ParsedCollection
from .summary import render_summary

_LOGGER = logging.getLogger(__name__)

CATALOG_FILE = "parsed-collection.json"
ENDPOINT_LIST_FILE = "endpoint-list.json"
VERIZON_CONNECT_FILE = "verizon-connect-mapping.json"
SAMBASAFETY_FILE = "sambasafety-integration.json"
SUMMARY_FILE = "API_SUMMARY.md"


def _write_json(path: Path, value) -> None:
    path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")


def write_artifacts(
    parsed: ParsedCollection,
    output_dir: str | Path,
    generated_at: datetime | None = None,
) -> list[Path]:
    """Write the four JSON artifacts and the Markdown summary. Returns the written paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, value in (
        (CATALOG_FILE, parsed.catalog),
        (ENDPOINT_LIST_FILE, parsed.endpoints),
        (VERIZON_CONNECT_FILE, parsed.verizon_connect_mapping),
        (SAMBASAFETY_FILE, parsed.sambasafety_integration),
    ):
        path = output_dir / name
        _write_json(path, value)
        _LOGGER.info("Wrote %s", path)
        written.append(path)

    summary_path = output_dir / SUMMARY_FILE
    summary_path.write_text(render_summary(parsed, generated_at), encoding="utf-8")
    _LOGGER.info("Wrote %s", summary_path)
    written.append(summary_path)

    _LOGGER.info(
        "Parsed %s categories, %s endpoints, %s Verizon Connect mappings, %s SambaSafety integration points",
        len(parsed.categories), len(parsed.endpoints),
        len(parsed.verizon_connect_mapping), len(parsed.sambasafety_integration),
    )
    return written

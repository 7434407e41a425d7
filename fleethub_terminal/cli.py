from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .client import TerminalApi
from .collection import CollectionFormatError, load_collection, write_artifacts
from .config import load_config
from .const import COLLECTION_OUTPUT_DIR, TABS
from .coordinator import DashboardCoordinator, LoadState
from .dashboard import render

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleethub-terminal",
        description="FleetHub Terminal – fleet dashboard and Terminal API tooling",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dashboard = subparsers.add_parser(
        "dashboard",
        help="Load drivers, vehicles, safety events and HOS status and print them.",
    )
    dashboard.add_argument(
        "--tab",
        choices=[*TABS, "all"],
        default="dashboard",
        help="Which view to print (default: dashboard).",
    )
    dashboard.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Terminal API base URL. If omitted, uses FLEETHUB_API_URL or the built-in default.",
    )
    dashboard.add_argument(
        "--strict-status",
        action="store_true",
        help="Treat non-2xx HTTP responses as errors.",
    )

    collection = subparsers.add_parser(
        "parse-collection",
        help="Parse a saved Terminal Postman collection into catalog artifacts.",
    )
    collection.add_argument("collection", type=str, help="Path to the collection JSON file.")
    collection.add_argument(
        "--output-dir",
        type=str,
        default=COLLECTION_OUTPUT_DIR,
        help=f"Directory for the generated files (default: {COLLECTION_OUTPUT_DIR}).",
    )
    return parser


async def _run_dashboard(api: TerminalApi, tab: str) -> int:
    coordinator = DashboardCoordinator(api)
    try:
        data = await coordinator.async_load()
    finally:
        await coordinator.async_shutdown()

    print(render(data, tab))
    return 0 if data.state is LoadState.LOADED else 1


def _run_parse_collection(collection: str, output_dir: str) -> int:
    try:
        parsed = load_collection(collection)
    except (OSError, CollectionFormatError) as e:
        _LOGGER.error("Failed to parse collection %s: %s", collection, e)
        return 1
    write_artifacts(parsed, output_dir)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.command == "dashboard":
        api = TerminalApi(
            base_url=args.base_url or config.base_url,
            timeout=config.timeout,
            strict_status=args.strict_status or config.strict_status,
        )
        return asyncio.run(_run_dashboard(api, args.tab))

    return _run_parse_collection(args.collection, args.output_dir)


if __name__ == "__main__":
    sys.exit(main())

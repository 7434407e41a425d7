"""Plain-text rendering of a DashboardData snapshot, one tab at a time."""

from __future__ import annotations

from typing import Sequence

from .const import TABS
from .coordinator_data import DashboardData
from .formatting import format_hours, format_timestamp, humanize, severity_style

BANNER = "FLEETHUB TERMINAL"
# Width of the rule printed under the banner and section titles.
RULE_WIDTH = 60


def _table(headers: Sequence[str], rows: list[Sequence[str]]) -> list[str]:
    """Left-aligned columns sized to their widest cell."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    fmt = "  ".join(f"{{:<{w}}}" for w in widths)
    lines = [fmt.format(*(h.upper() for h in headers)).rstrip()]
    lines.extend(fmt.format(*row).rstrip() for row in rows)
    return lines


def _section(title: str) -> list[str]:
    return [title, "-" * RULE_WIDTH]


def _render_overview(data: DashboardData) -> list[str]:
    lines = _section("Overview")
    lines.append(f" Total Drivers : {len(data.drivers)}")
    lines.append(f" Total Vehicles: {len(data.vehicles)}")
    lines.append(f" Safety Events : {len(data.safety_events)}")
    lines.append(f" HOS Tracked   : {len(data.hos_status)}")
    lines.append("")
    lines.extend(_section("Recent Safety Events"))
    if not data.safety_events:
        lines.append(" No safety events")
        return lines
    for event in data.safety_events:
        lines.append(
            f" [{severity_style(event.severity)}] {humanize(event.type)}"
            f" | Driver: {event.driver_id} | Vehicle: {event.vehicle_id}"
            f" | {format_timestamp(event.timestamp)}"
        )
    return lines


def _render_drivers(data: DashboardData) -> list[str]:
    lines = _section(f"Drivers ({len(data.drivers)})")
    rows = [
        [d.full_name, d.license_number, d.license_state, d.status]
        for d in data.drivers
    ]
    return lines + _table(["Name", "License", "State", "Status"], rows)


def _render_vehicles(data: DashboardData) -> list[str]:
    lines = _section(f"Vehicles ({len(data.vehicles)})")
    rows = [
        [v.name, f"{v.make} {v.model}", str(v.year), v.vin]
        for v in data.vehicles
    ]
    return lines + _table(["Name", "Make/Model", "Year", "VIN"], rows)


def _render_safety(data: DashboardData) -> list[str]:
    lines = _section(f"Safety Events ({len(data.safety_events)})")
    for event in data.safety_events:
        lines.append(f" {humanize(event.type)} [{event.severity}]")
        lines.append(f"   Driver : {event.driver_id}")
        lines.append(f"   Vehicle: {event.vehicle_id}")
        lines.append(f"   When   : {format_timestamp(event.timestamp)}")
    return lines


def _render_hos(data: DashboardData) -> list[str]:
    lines = _section(f"Hours of Service ({len(data.hos_status)})")
    rows = [
        [
            h.driver_id,
            format_hours(h.drive_time_remaining),
            format_hours(h.shift_time_remaining),
            humanize(h.status),
        ]
        for h in data.hos_status
    ]
    return lines + _table(["Driver", "Drive Time", "Shift Time", "Status"], rows)


_RENDERERS = {
    "dashboard": _render_overview,
    "drivers": _render_drivers,
    "vehicles": _render_vehicles,
    "safety": _render_safety,
    "hos": _render_hos,
}


def render(data: DashboardData, tab: str = "dashboard") -> str:
    """Return the text for one tab, or every tab when tab is 'all'."""
    if data.loading:
        return "Loading..."
    if tab == "all":
        tabs = TABS
    elif tab in _RENDERERS:
        tabs = (tab,)
    else:
        raise ValueError(f"Unknown tab: {tab}")

    lines = ["=" * RULE_WIDTH, f" {BANNER}", "=" * RULE_WIDTH]
    for name in tabs:
        lines.append("")
        lines.extend(_RENDERERS[name](data))
    return "\n".join(lines)

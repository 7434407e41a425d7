"""
Display helpers for dashboard values.

Rounding and wording happen here only; the models keep the values exactly as
the service sent them.
"""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from .const import DEFAULT_SEVERITY_STYLE, SEVERITY_STYLES


def format_hours(value: float | None) -> str:
    """Render an hours value with one decimal, halves rounded up: 3.25 -> '3.3h'."""
    if value is None:
        return "-"
    rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}h"


def humanize(value: str) -> str:
    """'hard_brake' -> 'Hard Brake'. Only the first underscore is replaced."""
    words = value.replace("_", " ", 1).split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def severity_style(severity: str) -> str:
    return SEVERITY_STYLES.get(severity, DEFAULT_SEVERITY_STYLE)


def format_timestamp(value: str) -> str:
    """Render an ISO-8601 timestamp in local time; unparsable input is returned as-is."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%Y-%m-%d %H:%M:%S")

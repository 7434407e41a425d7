"""
Runtime configuration for the FleetHub Terminal client.

Values come from the environment (a local ``.env`` file is loaded first) and
fall back to the defaults in const.py.
"""
from __future__ import annotations

import dataclasses
import logging
import os

from dotenv import load_dotenv

from .const import API_BASE_URL, REQUEST_TIMEOUT

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclasses.dataclass(frozen=True)
class TerminalConfig:
    base_url: str = API_BASE_URL
    timeout: float | None = REQUEST_TIMEOUT
    strict_status: bool = False
    log_level: str = "INFO"


def _parse_timeout(value: str | None) -> float | None:
    if value is None or not value.strip():
        return REQUEST_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        _LOGGER.warning("Ignoring invalid FLEETHUB_REQUEST_TIMEOUT value: %s", value)
        return REQUEST_TIMEOUT
    return timeout if timeout > 0 else None


def load_config(env_file: str | None = None) -> TerminalConfig:
    """Build a TerminalConfig from the environment."""
    load_dotenv(env_file)
    return TerminalConfig(
        base_url=os.getenv("FLEETHUB_API_URL", "").strip() or API_BASE_URL,
        timeout=_parse_timeout(os.getenv("FLEETHUB_REQUEST_TIMEOUT")),
        strict_status=os.getenv("FLEETHUB_STRICT_STATUS", "false").strip().lower() in _TRUE_VALUES,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )

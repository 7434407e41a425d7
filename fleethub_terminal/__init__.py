"""Async client and dashboard loader for the Terminal fleet API."""

from .client import TerminalApi
from .const import VERSION
from .coordinator import DashboardCoordinator
from .coordinator_data import DashboardData, LoadState
from .requests import ApiDecodeError, ApiResponseError, ApiTransportError, TerminalApiError

__version__ = VERSION

__all__ = [
    "ApiDecodeError",
    "ApiResponseError",
    "ApiTransportError",
    "DashboardCoordinator",
    "DashboardData",
    "LoadState",
    "TerminalApi",
    "TerminalApiError",
]

"""
Per-resource fetch functions for the Terminal API.

Each module owns one resource path and turns the decoded JSON into model
instances. Errors from the request layer propagate unchanged.
"""
from __future__ import annotations

import dataclasses

import aiohttp

from ..requests import build_url, make_request


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Everything a fetch function needs to issue one request."""

    session: aiohttp.ClientSession
    base_url: str
    timeout: float | None = None
    strict_status: bool = False

    async def get_json(self, *path: str):
        """GET {base_url}/{path...} and return the decoded body."""
        return await make_request(
            self.session,
            build_url(self.base_url, *path),
            timeout=self.timeout,
            strict_status=self.strict_status,
        )

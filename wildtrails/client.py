"""
WildTrailsClient: owns the header context and HTTP session for one run.

Headers are built once per client. Report requests for different regions
share nothing mutable and may be awaited concurrently.
"""
from __future__ import annotations

import logging

import aiohttp

from wildtrails.api.auth import get_standard_headers
from wildtrails.api.reports import fetch_report
from wildtrails.api.trailheads import fetch_directory
from wildtrails.const import REQUEST_TIMEOUT
from wildtrails.models import ReportDate, TrailheadDirectory

_LOGGER = logging.getLogger(__name__)


class WildTrailsClient:
    """Client for the trailhead and report resources of the wildtrails API."""

    def __init__(self, cookie: str, timeout: int = REQUEST_TIMEOUT) -> None:
        self.headers = get_standard_headers(cookie)
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "WildTrailsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def fetch_directory(self) -> TrailheadDirectory:
        """Fetch the trailhead directory snapshot."""
        return await fetch_directory(self.headers, session=self._get_session(), timeout=self.timeout)

    async def fetch_report(self, region: str) -> list[ReportDate]:
        """Fetch the normalized occupancy report of one region."""
        return await fetch_report(region, self.headers, session=self._get_session(), timeout=self.timeout)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

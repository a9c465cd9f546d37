"""
AvailabilityCoordinator: one fetch-compute cycle against the wildtrails API.

Responsibilities:
- Fetch the trailhead directory (fatal on failure).
- Fan out one report request per region and join them all.
- Keep each region's outcome separate so one failing region only drops its
  own rows.
- Reconcile every report against the directory with a single reference date
  and aggregate the result table.
"""
from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Iterable
from datetime import date

from wildtrails.aggregate import ResultTable, aggregate
from wildtrails.client import WildTrailsClient
from wildtrails.const import TIMEZONE, WALKUP_WINDOW_DAYS
from wildtrails.errors import TransportError, UnexpectedResponseError
from wildtrails.models import ReportDate, TrailheadDirectory
from wildtrails.reconcile import pacific_today, reconcile_reports

_LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RegionReport:
    """Outcome of one region's report request: either dates or an error."""

    region: str
    dates: list[ReportDate] = dataclasses.field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclasses.dataclass(frozen=True)
class RunResult:
    """Everything one run produced."""

    today: date
    directory: TrailheadDirectory
    reports: list[RegionReport]
    table: ResultTable

    @property
    def failed_regions(self) -> list[str]:
        return [r.region for r in self.reports if not r.ok]


class AvailabilityCoordinator:
    """Drives the directory → reports → reconcile → aggregate pipeline."""

    def __init__(
        self,
        client: WildTrailsClient,
        window_days: int = WALKUP_WINDOW_DAYS,
        timezone: str = TIMEZONE,
        regions: Iterable[str] | None = None,
        today: date | None = None,
    ) -> None:
        self.client = client
        self.window_days = window_days
        self.timezone = timezone
        self.regions = sorted(set(regions)) if regions else []
        self._today = today

    async def async_run(self) -> RunResult:
        """
        Run one full cycle.

        Directory errors and schema violations propagate; per-region transport
        and status errors are recorded on the RegionReport and logged.
        """
        # Fixed once so every entry is reconciled against the same "now"
        today = self._today or pacific_today(self.timezone)

        directory = await self.client.fetch_directory()
        regions = self._select_regions(directory)
        reports = await self._fetch_all_regions(regions)

        table = aggregate(
            reconcile_reports(
                (report_date for report in reports for report_date in report.dates),
                directory,
                today,
                self.window_days,
            )
        )
        result = RunResult(today=today, directory=directory, reports=reports, table=table)
        failed = result.failed_regions
        if failed:
            _LOGGER.warning("No data for %d of %d regions: %s", len(failed), len(reports), ", ".join(failed))
        _LOGGER.info("Found %d available trailhead-days across %d dates", len(table), len(table.dates()))
        return result

    def _select_regions(self, directory: TrailheadDirectory) -> list[str]:
        """Regions present in the directory, narrowed to the configured ones if any."""
        available = directory.regions()
        if not self.regions:
            return available
        unknown = [r for r in self.regions if r not in available]
        if unknown:
            _LOGGER.warning("Ignoring regions not present in the directory: %s", ", ".join(unknown))
        return [r for r in self.regions if r in available]

    async def _fetch_region(self, region: str) -> RegionReport:
        """Fetch one region, turning expected failures into a failed RegionReport."""
        try:
            dates = await self.client.fetch_report(region)
        except (TransportError, UnexpectedResponseError) as exc:
            _LOGGER.warning("Failed to fetch report for region %s: %s", region, exc)
            return RegionReport(region=region, error=exc)
        return RegionReport(region=region, dates=dates)

    async def _fetch_all_regions(self, regions: list[str]) -> list[RegionReport]:
        """Fetch every region concurrently and wait for all of them."""
        results = await asyncio.gather(
            *[self._fetch_region(region) for region in regions],
            return_exceptions=True,
        )
        # Anything still raised here (schema violations, bugs) is fatal, but
        # only after every branch has finished.
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)

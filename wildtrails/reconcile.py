"""
Availability reconciliation: joins report occupancy against the trailhead
directory and works out the remaining permits per trailhead and date.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date, datetime
from zoneinfo import ZoneInfo

from wildtrails.const import TIMEZONE, WALKUP_WINDOW_DAYS
from wildtrails.models import ReconciledEntry, ReportDate, Trailhead, TrailheadDirectory

_LOGGER = logging.getLogger(__name__)


def pacific_today(timezone: str = TIMEZONE, now: datetime | None = None) -> date:
    """Current calendar date in the park's time zone."""
    tz = ZoneInfo(timezone)
    if now is None:
        return datetime.now(tz).date()
    return now.astimezone(tz).date()


def select_bound(trailhead: Trailhead, day: date, today: date, window_days: int = WALKUP_WINDOW_DAYS) -> int:
    """Quota for dates beyond the walk-up window, full capacity otherwise."""
    if (day - today).days > window_days:
        return trailhead.quota
    return trailhead.capacity


def reconcile(
    day: date,
    trailhead_id: str,
    occupancy: int,
    directory: TrailheadDirectory,
    today: date,
    window_days: int = WALKUP_WINDOW_DAYS,
) -> ReconciledEntry | None:
    """
    Remaining permits for one trailhead on one date, or None when there is
    nothing to show.

    Trailheads missing from the directory are unlisted and ignored. Occupancy
    may exceed the bound (overbooking) and is clamped so availability never
    goes negative; entries without positive availability are dropped.
    """
    trailhead = directory.get(trailhead_id)
    if trailhead is None:
        _LOGGER.debug("Ignoring unlisted trailhead %s on %s", trailhead_id, day)
        return None

    bound = select_bound(trailhead, day, today, window_days)
    availability = bound - min(bound, occupancy)
    if availability <= 0:
        return None

    return ReconciledEntry(day, trailhead.name, availability)


def reconcile_reports(
    reports: Iterable[ReportDate],
    directory: TrailheadDirectory,
    today: date,
    window_days: int = WALKUP_WINDOW_DAYS,
) -> Iterator[ReconciledEntry]:
    """Reconcile every occupancy entry of every report date."""
    for report_date in reports:
        for trailhead_id, occupancy in report_date.occupancy_by_id.items():
            entry = reconcile(report_date.date, trailhead_id, occupancy, directory, today, window_days)
            if entry is not None:
                yield entry

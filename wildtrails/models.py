"""
Domain models for the wildtrails client.

Pure data classes with no HTTP or API logic. Everything here is immutable once
built; the directory snapshot is shared read-only by every region's report.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from datetime import date, datetime
from types import MappingProxyType

from wildtrails.const import STATUS_SUCCESS


@dataclasses.dataclass(frozen=True)
class Status:
    """Status block of the API response envelope."""

    type: str
    value: str

    @property
    def ok(self) -> bool:
        return self.type == STATUS_SUCCESS


@dataclasses.dataclass(frozen=True)
class Trailhead:
    """Representation of a single wilderness trailhead."""

    id: str
    name: str
    quota: int       # walk-up allotment
    capacity: int    # total advance-reservation allotment
    region: str | None = None
    alert: str | None = None
    notes: str | None = None


class TrailheadDirectory:
    """
    Snapshot of all trailheads as of ``timestamp``, addressed by id.

    The backing mapping is wrapped in a read-only proxy so the snapshot can be
    shared between concurrent consumers without copying.
    """

    def __init__(self, timestamp: datetime, trailheads: Mapping[str, Trailhead]) -> None:
        self.timestamp = timestamp
        self._trailheads = MappingProxyType(dict(trailheads))

    def get(self, trailhead_id: str) -> Trailhead | None:
        return self._trailheads.get(trailhead_id)

    def regions(self) -> list[str]:
        """Distinct region codes, sorted. Trailheads without a region are skipped."""
        return sorted({t.region for t in self._trailheads.values() if t.region})

    def __contains__(self, trailhead_id: object) -> bool:
        return trailhead_id in self._trailheads

    def __iter__(self) -> Iterator[Trailhead]:
        return iter(self._trailheads.values())

    def __len__(self) -> int:
        return len(self._trailheads)

    def __repr__(self) -> str:
        return f"TrailheadDirectory(timestamp={self.timestamp!r}, trailheads={len(self)})"


# A report value is either the row's calendar date or an occupancy count.
ReportValue = date | int


@dataclasses.dataclass(frozen=True)
class ReportDate:
    """Occupancy of every reported trailhead on one calendar date."""

    date: date
    occupancy_by_id: Mapping[str, int] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store a read-only copy
        object.__setattr__(self, "occupancy_by_id", MappingProxyType(dict(self.occupancy_by_id)))


@dataclasses.dataclass(frozen=True)
class ReconciledEntry:
    """Remaining permits for one trailhead on one date. Availability is always > 0."""

    date: date
    trailhead_name: str
    availability: int

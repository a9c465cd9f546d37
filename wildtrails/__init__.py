"""Remaining Yosemite wilderness permit availability, per trailhead and date."""
from wildtrails.aggregate import ResultTable, aggregate
from wildtrails.client import WildTrailsClient
from wildtrails.const import VERSION
from wildtrails.coordinator import AvailabilityCoordinator, RegionReport, RunResult
from wildtrails.errors import (
    ConfigError,
    SchemaViolation,
    TransportError,
    UnexpectedResponseError,
    WildTrailsError,
)
from wildtrails.models import ReconciledEntry, ReportDate, Status, Trailhead, TrailheadDirectory
from wildtrails.reconcile import pacific_today, reconcile, reconcile_reports

__version__ = VERSION

__all__ = [
    "AvailabilityCoordinator",
    "ConfigError",
    "ReconciledEntry",
    "RegionReport",
    "ReportDate",
    "ResultTable",
    "RunResult",
    "SchemaViolation",
    "Status",
    "Trailhead",
    "TrailheadDirectory",
    "TransportError",
    "UnexpectedResponseError",
    "WildTrailsClient",
    "WildTrailsError",
    "aggregate",
    "pacific_today",
    "reconcile",
    "reconcile_reports",
]

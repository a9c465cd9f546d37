"""
Exception hierarchy for the wildtrails client.

Data-quality conditions (unknown trailhead ids, non-integer occupancy values,
rows without a date) are not errors and never raise.
"""
from __future__ import annotations

from wildtrails.models import Status


class WildTrailsError(Exception):
    """Base class for every error raised by this package."""


class TransportError(WildTrailsError):
    """Network, HTTP or JSON decoding failure."""


class UnexpectedResponseError(WildTrailsError):
    """The API envelope reported a non-success status."""

    def __init__(self, status: Status) -> None:
        self.status = status
        super().__init__(f"Unexpected API status: {status.type}: {status.value}")


class SchemaViolation(WildTrailsError):
    """A report row's date field has the wrong shape."""


class ConfigError(WildTrailsError):
    """Settings failed validation."""

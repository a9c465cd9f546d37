"""
Low-level region report fetching and normalization.

Responsible for:
- Fetching the daily occupancy report of one region
- Decoding the polymorphic row values (a date or an occupancy count)
- Normalizing each row into a ReportDate
"""
from __future__ import annotations

import logging
from datetime import date

from wildtrails.api.envelope import unwrap
from wildtrails.const import API_URL, REPORT_DATE_KEY, RESOURCE_REPORT
from wildtrails.errors import SchemaViolation, TransportError
from wildtrails.models import ReportDate, ReportValue
from wildtrails.requests import make_request

_LOGGER = logging.getLogger(__name__)


def decode_report_value(value) -> ReportValue | None:
    """
    Pick the variant of a raw row value from its shape.

    ISO date strings decode to ``date``, non-negative integers to ``int``.
    Anything else (floats, booleans, negative numbers, other strings, null)
    is malformed and decodes to None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
    return None


def normalize_row(row: dict) -> ReportDate | None:
    """
    Convert one raw report row into a ReportDate.

    A row without a date carries nothing usable and is dropped (None).
    A date key holding anything but a date means the upstream schema changed
    and raises SchemaViolation. Non-integer occupancy values are dropped.
    """
    if REPORT_DATE_KEY not in row:
        _LOGGER.debug("Dropping report row without a date: %s", row)
        return None

    row_date = decode_report_value(row[REPORT_DATE_KEY])
    if not isinstance(row_date, date):
        raise SchemaViolation(
            f"Report row {REPORT_DATE_KEY!r} is not a date: {row[REPORT_DATE_KEY]!r}"
        )

    occupancy = {}
    for trailhead_id, raw_value in row.items():
        if trailhead_id == REPORT_DATE_KEY:
            continue
        value = decode_report_value(raw_value)
        if isinstance(value, int):
            occupancy[trailhead_id] = value
        else:
            _LOGGER.debug(
                "Dropping malformed occupancy %r for trailhead %s on %s",
                raw_value, trailhead_id, row_date,
            )

    return ReportDate(date=row_date, occupancy_by_id=occupancy)


def parse_report(payload) -> list[ReportDate]:
    """
    Normalize the ``response`` part of a report envelope.

    Expected shape: ``{"id": "<region>", "values": [row, ...]}``.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("values"), list):
        raise TransportError("Report payload has no values list")

    report_dates = []
    for row in payload["values"]:
        if not isinstance(row, dict):
            raise TransportError(f"Report row is not an object: {row!r}")
        report_date = normalize_row(row)
        if report_date is not None:
            report_dates.append(report_date)
    return report_dates


async def fetch_report(region: str, headers: dict, session=None, timeout: int | None = None) -> list[ReportDate]:
    """
    Fetch and normalize the occupancy report of one region.

    Raises UnexpectedResponseError if the envelope status is not a success
    marker, TransportError on network or decoding failure and SchemaViolation
    if a row's date field has the wrong shape.

    Corresponding CURL command:
    curl 'https://yosemite.org/wp-content/plugins/wildtrails/query.php?resource=report&region=<REGION>' \\
      -H 'cookie: <COOKIE>'
    """
    params = {"resource": RESOURCE_REPORT, "region": region}
    kwargs = {} if timeout is None else {"timeout": timeout}
    raw_json = await make_request(API_URL, headers, params=params, session=session, **kwargs)
    report_dates = parse_report(unwrap(raw_json, f"{RESOURCE_REPORT}/{region}"))
    _LOGGER.debug("Region %s reported %d dates", region, len(report_dates))
    return report_dates

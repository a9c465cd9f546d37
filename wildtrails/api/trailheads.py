"""
Low-level trailhead directory fetching from the wildtrails API.

Responsible for:
- Fetching the raw trailhead resource
- Mapping the JSON records onto Trailhead instances
- Building the immutable TrailheadDirectory snapshot
"""
import logging
from datetime import datetime

from wildtrails.api.envelope import unwrap
from wildtrails.const import API_URL, RESOURCE_TRAILHEADS
from wildtrails.errors import TransportError
from wildtrails.models import Trailhead, TrailheadDirectory
from wildtrails.requests import make_request

_LOGGER = logging.getLogger(__name__)


def _optional_str(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _count(record: dict, field: str) -> int:
    value = record[field]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TransportError(
            f"Trailhead {record.get('id')!r} has invalid {field}: {value!r}"
        )
    return value


def _parse_trailhead(key: str, record: dict) -> Trailhead:
    """Map a single raw API trailhead dict onto a Trailhead instance."""
    if not isinstance(record, dict):
        raise TransportError(f"Trailhead {key!r} is not an object: {record!r}")
    try:
        return Trailhead(
            id=str(record.get("id", key)),
            name=str(record["name"]),
            quota=_count(record, "quota"),
            capacity=_count(record, "capacity"),
            region=_optional_str(record.get("region")),
            alert=_optional_str(record.get("alert")),
            notes=_optional_str(record.get("notes")),
        )
    except KeyError as e:
        raise TransportError(f"Trailhead {key!r} is missing field {e}") from e


def parse_directory(payload) -> TrailheadDirectory:
    """
    Build a TrailheadDirectory from the ``response`` part of the envelope.

    Expected shape: ``{"timestamp": "...", "values": {id: record}}``.
    Extra fields on records are ignored.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("values"), dict):
        raise TransportError("Trailhead payload has no values mapping")
    try:
        timestamp = datetime.fromisoformat(str(payload["timestamp"]))
    except (KeyError, ValueError) as e:
        raise TransportError(f"Trailhead payload has invalid timestamp: {e}") from e

    trailheads = {
        key: _parse_trailhead(key, record)
        for key, record in payload["values"].items()
    }
    return TrailheadDirectory(timestamp, trailheads)


async def fetch_directory(headers: dict, session=None, timeout: int | None = None) -> TrailheadDirectory:
    """
    Fetch the trailhead directory.

    Raises UnexpectedResponseError if the envelope status is not a success
    marker and TransportError on network or decoding failure.

    Corresponding CURL command:
    curl 'https://yosemite.org/wp-content/plugins/wildtrails/query.php?resource=trailheads' \\
      -H 'cookie: <COOKIE>'
    """
    params = {"resource": RESOURCE_TRAILHEADS}
    kwargs = {} if timeout is None else {"timeout": timeout}
    raw_json = await make_request(API_URL, headers, params=params, session=session, **kwargs)
    directory = parse_directory(unwrap(raw_json, RESOURCE_TRAILHEADS))
    _LOGGER.info(
        "Fetched %d trailheads in %d regions (as of %s)",
        len(directory), len(directory.regions()), directory.timestamp,
    )
    return directory

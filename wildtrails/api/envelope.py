"""
Decoding of the ``{status: {type, value}, response: T}`` envelope that wraps
every wildtrails API response.
"""
import logging

from wildtrails.errors import TransportError, UnexpectedResponseError
from wildtrails.models import Status

_LOGGER = logging.getLogger(__name__)


def parse_status(raw_json) -> Status:
    """Map the envelope's status block onto a Status instance."""
    if not isinstance(raw_json, dict) or not isinstance(raw_json.get("status"), dict):
        raise TransportError(f"Response is not a status envelope: {str(raw_json)[:200]}")
    status = raw_json["status"]
    return Status(type=str(status.get("type", "")), value=str(status.get("value", "")))


def unwrap(raw_json, resource: str):
    """
    Validate the envelope status and return its ``response`` payload.

    Raises UnexpectedResponseError when the status type is not the success
    marker, TransportError when the envelope itself is malformed.
    """
    status = parse_status(raw_json)
    if not status.ok:
        _LOGGER.error("API returned status %s for %s: %s", status.type, resource, status.value)
        raise UnexpectedResponseError(status)
    if "response" not in raw_json:
        raise TransportError(f"Envelope for {resource} has no response payload")
    return raw_json["response"]

"""
Session-cookie handling for the wildtrails API.

Responsible for:
- Checking that an externally supplied cookie can be sent as a header value
- Building the standard headers used by all API calls

The cookie itself is opaque; it is copied from a logged-in browser session
and never inspected beyond header-safety.
"""
import logging

from wildtrails.const import BROWSER_HEADERS

_LOGGER = logging.getLogger(__name__)


def validate_cookie(cookie: str) -> str:
    """
    Return the cookie stripped of surrounding whitespace.

    Raises ValueError if the cookie is empty or cannot be sent as an HTTP
    header value (line breaks, control characters, non latin-1 text).
    """
    if not isinstance(cookie, str):
        raise ValueError(f"Cookie must be a string, got {type(cookie).__name__}")
    cookie = cookie.strip()
    if not cookie:
        raise ValueError("Cookie is empty")
    if any((ord(ch) < 0x20 and ch != "\t") or ord(ch) == 0x7F for ch in cookie):
        raise ValueError("Cookie contains control characters")
    try:
        cookie.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError("Cookie is not representable as a header value") from e
    return cookie


def get_standard_headers(cookie: str) -> dict:
    """
    Build the HTTP headers sent with every wildtrails API request.

    :param cookie: Session cookie string copied from the browser.
    :return: Dictionary of HTTP headers.
    """
    headers = dict(BROWSER_HEADERS)
    headers["cookie"] = validate_cookie(cookie)
    _LOGGER.debug("Built standard headers (%d entries)", len(headers))
    return headers

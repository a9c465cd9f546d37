"""
Settings for a wildtrails run.

Values come from, in order of precedence: explicit overrides (command line),
the process environment (a ``.env`` file in the working directory is loaded
first), and finally an interactive prompt for the cookie.
"""
from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Mapping
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import voluptuous as vol
from dotenv import load_dotenv

from wildtrails.api.auth import validate_cookie
from wildtrails.const import (
    COOKIE_ENV,
    REQUEST_TIMEOUT,
    TIMEOUT_ENV,
    TIMEZONE,
    WALKUP_WINDOW_DAYS,
    WINDOW_DAYS_ENV,
)
from wildtrails.errors import ConfigError

_LOGGER = logging.getLogger(__name__)


def header_value(value):
    try:
        return validate_cookie(value)
    except ValueError as e:
        raise vol.Invalid(str(e)) from e


def timezone_name(value):
    try:
        ZoneInfo(str(value))
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise vol.Invalid(f"unknown time zone {value!r}") from e
    return str(value)


def iso_date(value):
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as e:
        raise vol.Invalid(f"not an ISO date: {value!r}") from e


non_negative_int = vol.All(vol.Coerce(int), vol.Range(min=0))
positive_int = vol.All(vol.Coerce(int), vol.Range(min=1))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required("cookie"): vol.All(str, header_value),
        vol.Optional("window_days", default=WALKUP_WINDOW_DAYS): non_negative_int,
        vol.Optional("timezone", default=TIMEZONE): timezone_name,
        vol.Optional("timeout", default=REQUEST_TIMEOUT): positive_int,
        vol.Optional("regions", default=list): [vol.All(str, vol.Strip, vol.Length(min=1))],
        vol.Optional("today", default=None): vol.Any(None, iso_date),
    }
)


def validate_settings(settings: Mapping) -> dict:
    """Validate a settings mapping, raising ConfigError on failure."""
    try:
        return CONFIG_SCHEMA(dict(settings))
    except vol.Invalid as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _prompt_cookie() -> str | None:
    if not sys.stdin.isatty():
        return None
    return input("Cookie plz: ")


def load_settings(
    overrides: Mapping | None = None,
    environ: Mapping[str, str] | None = None,
    prompt: Callable[[], str | None] | None = _prompt_cookie,
) -> dict:
    """
    Collect and validate settings.

    :param overrides: Values that win over the environment; None values are ignored.
    :param environ: Environment to read; defaults to os.environ after loading ``.env``.
    :param prompt: Called for the cookie when no other source provides one.
    :return: Validated settings dictionary.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    settings: dict = {}
    if environ.get(COOKIE_ENV):
        settings["cookie"] = environ[COOKIE_ENV]
    if environ.get(WINDOW_DAYS_ENV):
        settings["window_days"] = environ[WINDOW_DAYS_ENV]
    if environ.get(TIMEOUT_ENV):
        settings["timeout"] = environ[TIMEOUT_ENV]

    settings.update({k: v for k, v in (overrides or {}).items() if v is not None})

    if not settings.get("cookie") and prompt is not None:
        _LOGGER.debug("%s not set, prompting for cookie", COOKIE_ENV)
        cookie = prompt()
        if cookie:
            settings["cookie"] = cookie

    if not settings.get("cookie"):
        raise ConfigError(f"No cookie supplied; set {COOKIE_ENV} or pass --cookie")

    return validate_settings(settings)

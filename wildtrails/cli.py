"""
Command-line entry point: fetch availability once and print it as CSV.

Usage:
    wildtrails [--cookie COOKIE] [--region CODE ...] [-v]

Examples:
    COOKIE='...' wildtrails               # all regions, CSV to stdout
    wildtrails -r A -r B -v               # two regions, info logging
    wildtrails --today 2020-09-06         # pin the reference date
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from wildtrails.client import WildTrailsClient
from wildtrails.config import load_settings
from wildtrails.const import VERSION
from wildtrails.coordinator import AvailabilityCoordinator, RunResult
from wildtrails.errors import ConfigError, WildTrailsError
from wildtrails.output import write_csv

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="wildtrails",
        description="List remaining Yosemite wilderness permits per trailhead and date",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output is one 'date,trailhead,availability' line per trailhead-day with
permits left, ordered by date then trailhead name.

The session cookie is read from --cookie, then the COOKIE environment
variable (a .env file is honoured), then an interactive prompt.
        """
    )
    parser.add_argument('--cookie', default=None, help='Session cookie copied from a logged-in browser')
    parser.add_argument(
        '-r', '--region',
        dest='regions',
        action='append',
        default=None,
        help='Only fetch this region code (repeatable, default: all regions)'
    )
    parser.add_argument(
        '--window-days',
        type=int,
        default=None,
        help='Walk-up window in days; later dates are bound by quota (default: 15)'
    )
    parser.add_argument('--timezone', default=None, help='Time zone of the reference date (default: America/Los_Angeles)')
    parser.add_argument('--timeout', type=int, default=None, help='Per-request timeout in seconds (default: 30)')
    parser.add_argument('--today', default=None, help='Reference date as YYYY-MM-DD (default: today in the park)')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='More logging (-v info, -vv debug)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def async_run(settings: dict) -> RunResult:
    """Run one cycle with validated settings."""
    async with WildTrailsClient(settings["cookie"], timeout=settings["timeout"]) as client:
        coordinator = AvailabilityCoordinator(
            client,
            window_days=settings["window_days"],
            timezone=settings["timezone"],
            regions=settings["regions"],
            today=settings["today"],
        )
        return await coordinator.async_run()


def main(argv=None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    overrides = {
        "cookie": args.cookie,
        "regions": args.regions,
        "window_days": args.window_days,
        "timezone": args.timezone,
        "timeout": args.timeout,
        "today": args.today,
    }
    try:
        settings = load_settings(overrides)
    except ConfigError as e:
        _LOGGER.error("%s", e)
        return EXIT_CONFIG

    try:
        result = asyncio.run(async_run(settings))
    except WildTrailsError as e:
        _LOGGER.error("Run failed: %s", e)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        _LOGGER.error("Interrupted")
        return EXIT_FAILURE

    write_csv(result.table)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

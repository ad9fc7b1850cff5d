"""Parsing of the timestamps GitLab puts in webhook payloads."""

import re
from datetime import UTC, datetime, timedelta, timezone

from ci_tracer.errors import TimestampParseError

GITLAB_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

GITLAB_TIME_PATTERN = re.compile(
    r"(?P<moment>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) "
    r"(?P<zone>Z|[A-Z]{3}|[A-Z]{3,4}T|GMT[+-]\d{1,2}|[+-]\d{2})"
)

# Offsets in hours of the zone abbreviations a GitLab server may be set to.
ZONE_OFFSETS: dict[str, float] = {
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "WET": 0,
    "WEST": 1,
    "BST": 1,
    "CET": 1,
    "CEST": 2,
    "EET": 2,
    "EEST": 3,
    "MSK": 3,
    "IST": 5.5,
    "SGT": 8,
    "HKT": 8,
    "JST": 9,
    "KST": 9,
    "AEST": 10,
    "AEDT": 11,
    "NZST": 12,
    "NZDT": 13,
    "AST": -4,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}


def zone_offset(zone: str) -> timezone:
    """Resolve the zone part of a GitLab timestamp to a fixed offset.

    Abbreviations missing from ``ZONE_OFFSETS`` are taken as UTC.
    """
    if zone.startswith("GMT") and len(zone) > 3:
        hours: float = int(zone[3:])
    elif zone[0] in "+-":
        hours = int(zone)
    else:
        hours = ZONE_OFFSETS.get(zone, 0)
    return timezone(timedelta(hours=hours))


def parse_gitlab_time(value: object) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS TZ`` timestamp into an aware datetime.

    The zone is an abbreviation (``UTC``, ``CET``...), ``GMT+h`` or ``+hh``.

    Args:
        value: Raw value from the payload, e.g. ``"2020-02-15 15:23:28 UTC"``

    Returns:
        Timezone-aware datetime converted to UTC

    Raises:
        TimestampParseError: If the value is not a string in the expected layout

    """
    if not isinstance(value, str):
        raise TimestampParseError(value)

    match = GITLAB_TIME_PATTERN.fullmatch(value)
    if match is None:
        raise TimestampParseError(value)

    try:
        parsed = datetime.strptime(match["moment"], GITLAB_TIME_FORMAT)
        offset = zone_offset(match["zone"])
    except ValueError as e:
        raise TimestampParseError(value) from e

    return parsed.replace(tzinfo=offset).astimezone(UTC)


def format_gitlab_time(moment: datetime) -> str:
    """Render a datetime the way GitLab does in webhook payloads."""
    return moment.astimezone(UTC).strftime(GITLAB_TIME_FORMAT) + " UTC"

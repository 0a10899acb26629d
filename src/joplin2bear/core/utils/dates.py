"""Strict RFC 3339 timestamp parsing for front matter date fields"""

import re
from datetime import datetime, timedelta, timezone

from joplin2bear.core.errors import (
    InvalidCreatedFormatError,
    InvalidDateFormatError,
    InvalidUpdatedFormatError,
)


RFC3339_RE = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?'
    r'(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<oh>\d{2}):(?P<om>\d{2}))$',
    re.ASCII,
)

DATE_ERRORS: dict[str, type[InvalidDateFormatError]] = {
    'created': InvalidCreatedFormatError,
    'updated': InvalidUpdatedFormatError,
}


def _offset(m: re.Match) -> timezone:
    """Return the fixed UTC offset described by the match."""
    if m.group('utc'):
        return timezone.utc
    delta = timedelta(hours=int(m.group('oh')), minutes=int(m.group('om')))
    return timezone(-delta if m.group('sign') == '-' else delta)


def parse_timestamp(value: str, field: str) -> datetime:
    """Parse an RFC 3339 date-time with explicit offset into an aware UTC datetime.

    Date-only values and date-times without an offset are rejected rather than
    assumed to be UTC. Raises the InvalidDateFormatError subclass for field.
    """
    error = DATE_ERRORS[field]
    m = RFC3339_RE.fullmatch(value)
    if not m:
        raise error(value)
    if m.group('om') and int(m.group('om')) >= 60:
        raise error(value)

    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    fraction = m.group(7) or ''
    microsecond = int(fraction[:6].ljust(6, '0'))  # sub-microsecond digits truncated

    try:
        parsed = datetime(year, month, day, hour, minute, second, microsecond, tzinfo=_offset(m))
    except ValueError as e:
        raise error(value) from e
    return parsed.astimezone(timezone.utc)

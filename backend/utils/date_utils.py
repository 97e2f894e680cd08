"""
Date parsing and age calculation.

Dates of birth arrive in several shapes (bare dates, RFC 3339 timestamps,
UTC timestamps, or values that only start with a date). ``parse_date``
reduces all of them to a calendar date; ``calculate_age`` derives whole
years from that date.
"""

import re
from datetime import date
from typing import Callable, Optional, Tuple

from exceptions import InvalidDateFormat

_DATE = r'(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})'
_TIME = r'T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})(?:\.[0-9]+)?'
_OFFSET = r'(?P<offset>Z|[+-](?P<offset_hour>[0-9]{2}):(?P<offset_minute>[0-9]{2}))'

TIMESTAMP_WITH_OFFSET = re.compile(_DATE + _TIME + _OFFSET)
DATE_ONLY = re.compile(_DATE)
TIMESTAMP_UTC = re.compile(_DATE + _TIME + 'Z')


def _date_from_match(match: 're.Match[str]') -> date:
    """
    Build a date from a layout match, validating any time fields.

    The date is taken as written, in the timestamp's own offset.

    Raises:
        ValueError: If a field is out of range
    """
    fields = match.groupdict()
    if fields.get('hour') is not None:
        if int(fields['hour']) > 23 or int(fields['minute']) > 59 or int(fields['second']) > 59:
            raise ValueError("time out of range")
    if fields.get('offset_hour') is not None:
        if int(fields['offset_hour']) > 23 or int(fields['offset_minute']) > 59:
            raise ValueError("offset out of range")
    return date(int(fields['year']), int(fields['month']), int(fields['day']))


def _parse_layout(pattern: 're.Pattern[str]') -> Callable[[str], Optional[date]]:
    def parse(value: str) -> Optional[date]:
        match = pattern.fullmatch(value)
        if match is None:
            return None
        try:
            return _date_from_match(match)
        except ValueError:
            return None
    return parse


def _parse_date_prefix(value: str) -> Optional[date]:
    # Last resort: whatever precedes the first 'T'
    if 'T' not in value:
        return None
    return _parse_layout(DATE_ONLY)(value.split('T', 1)[0])


# Order matters: the first layout that parses wins
PARSERS: Tuple[Tuple[str, Callable[[str], Optional[date]]], ...] = (
    ('timestamp_with_offset', _parse_layout(TIMESTAMP_WITH_OFFSET)),
    ('date_only', _parse_layout(DATE_ONLY)),
    ('timestamp_utc', _parse_layout(TIMESTAMP_UTC)),
    ('date_prefix', _parse_date_prefix),
)


def parse_date(value: str) -> date:
    """
    Parse a date of birth into a calendar date.

    Args:
        value: Date string, e.g. ``2001-05-06``, ``2001-05-06T00:00:00Z``
            or ``2001-05-06T12:30:00+02:00``

    Returns:
        The calendar date of the first accepted layout that matches

    Raises:
        InvalidDateFormat: If no accepted layout matches
    """
    if not isinstance(value, str):
        raise InvalidDateFormat(value)

    for _name, parser in PARSERS:
        parsed = parser(value)
        if parsed is not None:
            return parsed

    raise InvalidDateFormat(value)


def calculate_age(dob: date, today: Optional[date] = None) -> int:
    """
    Whole years between ``dob`` and ``today``.

    The year difference is reduced by one when today's day-of-year is
    smaller than the birth date's day-of-year. Around 29 February in leap
    years this can differ from a calendar-exact age by one day; callers rely
    on the existing numbers, so keep it.

    Args:
        dob: Date of birth
        today: Reference date (defaults to the current local date)

    Returns:
        Age in whole years
    """
    today = today or date.today()
    years = today.year - dob.year
    if today.timetuple().tm_yday < dob.timetuple().tm_yday:
        years -= 1
    return years


def format_date(value: date) -> str:
    """Render a date in the canonical ``YYYY-MM-DD`` layout."""
    return value.isoformat()

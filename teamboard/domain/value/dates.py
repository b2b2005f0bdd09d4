"""Parsing of calendar dates and timestamps coming from the store."""

from datetime import date, datetime
from typing import Any, Optional

import logfire

from teamboard.domain.error import InvalidDateError


def parse_calendar_date(value: Any) -> date:
    """Parse a calendar date.

    Accepts ``date``, ``datetime`` (its date part is used) and ISO-8601 text
    holding either a date or a full timestamp.

    Raises:
        InvalidDateError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise InvalidDateError(value)


def parse_timestamp(value: Any) -> datetime:
    """Parse a timestamp.

    A bare date is read as midnight of that day.

    Raises:
        InvalidDateError: If the value cannot be read as a timestamp
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            pass
    raise InvalidDateError(value)


def lenient_calendar_date(value: Any, field: str) -> Optional[date]:
    """Parse a calendar date, dropping unparsable values.

    Records from the store are summarised on a best-effort basis: a bad date
    must exclude the record from date-based views, not fail the whole page.
    """
    if value is None or value == "":
        return None
    try:
        return parse_calendar_date(value)
    except InvalidDateError:
        logfire.warn("Ignoring unparsable date", field=field, value=repr(value))
        return None


def lenient_timestamp(value: Any, field: str) -> Optional[datetime]:
    """Parse a timestamp, dropping unparsable values."""
    if value is None or value == "":
        return None
    try:
        return parse_timestamp(value)
    except InvalidDateError:
        logfire.warn("Ignoring unparsable timestamp", field=field, value=repr(value))
        return None

"""
Calendar helpers for epoch-millisecond dates.

Dates are stored as integer epoch milliseconds pointing at local midnight.
All month/week/year windows are half-open, ``[start, end)``, and computed
on the server's local calendar.
"""

import datetime
import logging
from typing import Any

from app.core.config import TIME_FORMAT_HM
from app.core.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR, MS_PER_DAY

logger = logging.getLogger(__name__)


def parse_clock_time(value: Any, field_name: str = "time") -> datetime.time:
    """Parse a ``HH:MM`` clock time.

    Accepts ``datetime.time`` objects as-is. Raises ValueError for empty,
    malformed or unsupported values (logged, never swallowed).
    """
    if isinstance(value, datetime.time):
        return value

    if isinstance(value, str):
        s = value.strip()
        if not s:
            logger.error("%s is empty string", field_name)
            raise ValueError(f"{field_name} is empty")

        try:
            return datetime.datetime.strptime(s, TIME_FORMAT_HM).time()
        except ValueError as e:
            logger.warning("Failed parsing %s as HH:MM. value=%r", field_name, value)
            raise ValueError(f"Invalid {field_name} format: {value!r}") from e

    logger.error("Unsupported %s type. type=%s value=%r", field_name, type(value).__name__, value)
    raise ValueError(f"Unsupported {field_name} type: {type(value).__name__}")


def ms_to_local_datetime(ms: int) -> datetime.datetime:
    """Epoch milliseconds -> naive local datetime."""
    return datetime.datetime.fromtimestamp(ms / 1000)


def ms_to_local_date(ms: int) -> datetime.date:
    return ms_to_local_datetime(ms).date()


def local_date_to_ms(date: datetime.date) -> int:
    """Local midnight of ``date`` as epoch milliseconds."""
    midnight = datetime.datetime.combine(date, datetime.time())
    return int(round(midnight.timestamp() * 1000))


def normalize_to_day(ms: int) -> int:
    """Snap an instant to local midnight of its day."""
    return local_date_to_ms(ms_to_local_date(ms))


def month_window(year: int, month: int) -> tuple[int, int]:
    """
    Half-open window for a calendar month (month 1-12).

    Returns:
        (first instant of day 1, first instant of the following month)
    """
    start = datetime.date(year, month, 1)
    if month == MONTHS_PER_YEAR:
        end = datetime.date(year + 1, 1, 1)
    else:
        end = datetime.date(year, month + 1, 1)
    return local_date_to_ms(start), local_date_to_ms(end)


def month_window_for(ms: int) -> tuple[int, int]:
    """Window of the calendar month containing the instant ``ms``."""
    date = ms_to_local_date(ms)
    return month_window(date.year, date.month)


def year_window(year: int) -> tuple[int, int]:
    return local_date_to_ms(datetime.date(year, 1, 1)), local_date_to_ms(datetime.date(year + 1, 1, 1))


def week_window(week_start_ms: int) -> tuple[int, int]:
    """Seven days forward from ``week_start_ms``, counted in milliseconds."""
    return week_start_ms, week_start_ms + DAYS_PER_WEEK * MS_PER_DAY


def sunday_week_start(date: datetime.date) -> datetime.date:
    """
    Sunday on or before ``date``.

    Python counts Monday as 0; a Sunday-first calendar counts Sunday as 0,
    so the offset is ``(weekday() + 1) % 7``.
    """
    days_since_sunday = (date.weekday() + 1) % DAYS_PER_WEEK
    return date - datetime.timedelta(days=days_since_sunday)

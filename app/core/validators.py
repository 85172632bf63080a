# app/core/validators.py

import datetime

from fastapi import HTTPException, status

from app.core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from app.core.time_utils import ms_to_local_date, parse_clock_time


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def validate_clock_time(value: str, field_name: str) -> datetime.time:
    """
    Parse an ``HH:MM`` time or raise HTTP 400.
    """
    try:
        return parse_clock_time(value, field_name)
    except ValueError as e:
        raise _bad_request(str(e)) from e


def validate_hourly_rate(hourly_rate: float) -> float:
    """Timlönen måste vara positiv."""
    if hourly_rate <= 0:
        raise _bad_request("Hourly rate must be positive")
    return hourly_rate


def validate_work_session_input(start_time: str, end_time: str, break_minutes: int, hourly_rate: float) -> None:
    """
    Reject session input the earnings engine would accept but misprice.

    - start/end must be ``HH:MM``
    - hourly rate must be positive
    - break must be non-negative and no longer than the shift
    """
    start = validate_clock_time(start_time, "start_time")
    end = validate_clock_time(end_time, "end_time")
    validate_hourly_rate(hourly_rate)

    if break_minutes < 0:
        raise _bad_request("Break minutes cannot be negative")

    shift_minutes = (end.hour - start.hour) * MINUTES_PER_HOUR + (end.minute - start.minute)
    if shift_minutes < 0:
        shift_minutes += MINUTES_PER_DAY

    if break_minutes > shift_minutes:
        raise _bad_request("Break cannot be longer than the shift")


def validate_epoch_ms(value: int, field_name: str = "date") -> int:
    """
    Datum som epoch-millisekunder.

    Values the local calendar cannot represent give HTTP 400, as do days
    outside the years accepted by ``validate_year_month``.
    """
    try:
        day = ms_to_local_date(value)
    except (ValueError, OverflowError, OSError) as e:
        raise _bad_request(f"Invalid {field_name}") from e

    if not 1970 <= day.year < datetime.MAXYEAR:
        raise _bad_request(f"Invalid {field_name}")
    return value


def validate_amount(amount: float) -> float:
    if amount <= 0:
        raise _bad_request("Amount must be positive")
    return amount


def validate_year_month(year: int, month: int | None = None) -> None:
    """
    Validerar år och (valfri) månad, 1-12.

    Ogiltiga värden ger HTTP 400.
    """
    # Epoch-ms dates; the year after must also be representable
    if not 1970 <= year < datetime.MAXYEAR:
        raise _bad_request("Invalid year")
    try:
        datetime.date(year, 1 if month is None else month, 1)
    except ValueError as e:
        raise _bad_request("Invalid date") from e


def validate_not_blank(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise _bad_request(f"{field_name} is required")
    return value

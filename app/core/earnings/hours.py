"""Worked-hours arithmetic for a single shift."""

from app.core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from app.core.time_utils import parse_clock_time


def compute_worked_hours(start_time: str, end_time: str, break_minutes: int) -> float:
    """
    Hours worked between two clock times, minus the break.

    Both times are placed on the same reference day. An end time before the
    start time means the shift crossed midnight, and one day is added.
    Shifts of 24 hours or more cannot be expressed.

    The result is not clamped: a break longer than the shift gives negative
    hours. Rejecting such input is up to the caller.

    Args:
        start_time: "HH:MM"
        end_time: "HH:MM"
        break_minutes: Unpaid break in minutes

    Returns:
        Fractional hours worked
    """
    start = parse_clock_time(start_time, "start_time")
    end = parse_clock_time(end_time, "end_time")

    total_minutes = (end.hour * MINUTES_PER_HOUR + end.minute) - (start.hour * MINUTES_PER_HOUR + start.minute)

    # Pass över midnatt
    if total_minutes < 0:
        total_minutes += MINUTES_PER_DAY

    worked_minutes = total_minutes - break_minutes
    return worked_minutes / MINUTES_PER_HOUR

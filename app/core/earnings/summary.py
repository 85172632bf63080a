"""Sammanfattningar för veckor, månader och år."""

from app.core.config import DATE_FORMAT_ISO
from app.core.constants import MONTHS_PER_YEAR
from app.core.time_utils import local_date_to_ms, ms_to_local_date, sunday_week_start
from app.core.types import MonthSlot, PeriodSummary, WeekSummary


def _value(record, field: str) -> float:
    """Numeric field of a session; unset optional columns count as 0."""
    return getattr(record, field, None) or 0.0


def _average(total: float, count: int) -> float:
    return total / count if count > 0 else 0.0


def summarize_period(sessions, holidays) -> PeriodSummary:
    """
    Totals for sessions and holidays already filtered to one window.

    Each session counts as one work day, also when several sessions share a
    calendar date. ``holiday_days`` counts holiday sessions worked, while
    ``total_holidays`` counts holidays on the calendar whether worked or not.

    Args:
        sessions: WorkSession records in the window
        holidays: Holiday records in the window

    Returns:
        PeriodSummary dict (without weekly breakdown)
    """
    sessions = list(sessions)
    total_hours = sum(_value(s, "hours_worked") for s in sessions)
    work_days = len(sessions)

    return {
        "total_hours": total_hours,
        "total_earnings": sum(_value(s, "total_earnings") for s in sessions),
        "regular_hours": sum(_value(s, "regular_hours") for s in sessions),
        "overtime_hours": sum(_value(s, "overtime_hours") for s in sessions),
        "work_days": work_days,
        "holiday_days": sum(1 for s in sessions if s.is_holiday),
        "total_holidays": len(list(holidays)),
        "average_hours_per_day": _average(total_hours, work_days),
    }


def weekly_breakdown(sessions) -> list[WeekSummary]:
    """
    Group sessions by the Sunday-aligned week containing their date.

    Sessions usually arrive newest first, so weeks are sorted by start date
    before returning.

    Returns:
        One WeekSummary per distinct week, oldest week first
    """
    weeks: dict[str, WeekSummary] = {}

    for s in sessions:
        week_start = sunday_week_start(ms_to_local_date(s.date))
        key = week_start.strftime(DATE_FORMAT_ISO)

        if key not in weeks:
            weeks[key] = {
                "week": key,
                "week_start": local_date_to_ms(week_start),
                "hours": 0.0,
                "earnings": 0.0,
                "regular_hours": 0.0,
                "overtime_hours": 0.0,
                "days": 0,
                "holidays": 0,
            }

        week = weeks[key]
        week["hours"] += _value(s, "hours_worked")
        week["earnings"] += _value(s, "total_earnings")
        week["regular_hours"] += _value(s, "regular_hours")
        week["overtime_hours"] += _value(s, "overtime_hours")
        week["days"] += 1
        if s.is_holiday:
            week["holidays"] += 1

    return [weeks[key] for key in sorted(weeks)]


def yearly_breakdown(sessions) -> list[MonthSlot]:
    """
    Twelve fixed month slots, filled by each session's month of year.

    Independent of ``summarize_period``; slot ``i`` holds month ``i + 1``
    and empty months stay at zero.
    """
    slots: list[MonthSlot] = [
        {
            "month": index + 1,
            "total_hours": 0.0,
            "total_earnings": 0.0,
            "regular_hours": 0.0,
            "overtime_hours": 0.0,
            "work_days": 0,
            "holiday_days": 0,
            "average_hours_per_day": 0.0,
        }
        for index in range(MONTHS_PER_YEAR)
    ]

    for s in sessions:
        slot = slots[ms_to_local_date(s.date).month - 1]
        slot["total_hours"] += _value(s, "hours_worked")
        slot["total_earnings"] += _value(s, "total_earnings")
        slot["regular_hours"] += _value(s, "regular_hours")
        slot["overtime_hours"] += _value(s, "overtime_hours")
        slot["work_days"] += 1
        if s.is_holiday:
            slot["holiday_days"] += 1

    for slot in slots:
        slot["average_hours_per_day"] = _average(slot["total_hours"], slot["work_days"])

    return slots

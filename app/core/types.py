# app/core/types.py

"""
Type definitions for the result structures of the earnings engine.

Summaries are plain dicts so routes can return them as JSON directly;
these TypedDicts document their shape.
"""

from typing import NewType, TypedDict

# Domain-specific type aliases using NewType for type safety
EpochMs = NewType("EpochMs", int)
Year = NewType("Year", int)
Month = NewType("Month", int)

# Type aliases for common structures
Hours = float
MonetaryAmount = float


class EarningsBreakdown(TypedDict):
    """Computed pay fields of one work session."""

    regular_hours: Hours
    overtime_hours: Hours
    regular_earnings: MonetaryAmount
    overtime_earnings: MonetaryAmount
    holiday_earnings: MonetaryAmount
    total_earnings: MonetaryAmount


class WeekSummary(TypedDict):
    """One entry of a month's weekly breakdown."""

    week: str  # "YYYY-MM-DD" of the Sunday starting the week
    week_start: EpochMs
    hours: Hours
    earnings: MonetaryAmount
    regular_hours: Hours
    overtime_hours: Hours
    days: int
    holidays: int


class PeriodSummary(TypedDict, total=False):
    """Aggregate over a window of sessions and holidays."""

    total_hours: Hours
    total_earnings: MonetaryAmount
    regular_hours: Hours
    overtime_hours: Hours
    work_days: int
    holiday_days: int
    total_holidays: int
    average_hours_per_day: Hours
    weekly_breakdown: list[WeekSummary]
    # Week and month reports only; serialized like the list endpoints
    sessions: list[dict]
    holidays: list[dict]


class MonthSlot(TypedDict):
    """One of the twelve month slots of a yearly breakdown."""

    month: Month
    total_hours: Hours
    total_earnings: MonetaryAmount
    regular_hours: Hours
    overtime_hours: Hours
    work_days: int
    holiday_days: int
    average_hours_per_day: Hours


class YearlyData(TypedDict):
    """Year report: month slots plus year totals and averages."""

    year: Year
    monthly_data: list[MonthSlot]
    total_hours: Hours
    total_earnings: MonetaryAmount
    total_regular_hours: Hours
    total_overtime_hours: Hours
    total_work_days: int
    total_holiday_days: int
    average_hours_per_work_day: Hours
    average_earnings_per_work_day: MonetaryAmount
    average_monthly_earnings: MonetaryAmount

"""Earnings for a single work session: regular, tiered overtime and holiday pay."""

from app.core.config import (
    DAILY_REGULAR_HOURS_LIMIT,
    HOLIDAY_MULTIPLIER,
    MONTHLY_OVERTIME_THRESHOLD_HOURS,
    OVERTIME_MULTIPLIER_TIER1,
    OVERTIME_MULTIPLIER_TIER2,
)
from app.core.types import EarningsBreakdown


def split_overtime_tiers(overtime_hours: float, prior_monthly_overtime_hours: float) -> tuple[float, float]:
    """
    Split a session's overtime between the two monthly tiers.

    Args:
        overtime_hours: Overtime of this session
        prior_monthly_overtime_hours: Overtime already stored this month

    Returns:
        (hours at the first tier, hours at the second tier)
    """
    total_overtime_this_month = prior_monthly_overtime_hours + overtime_hours

    if total_overtime_this_month <= MONTHLY_OVERTIME_THRESHOLD_HOURS:
        return overtime_hours, 0.0

    if prior_monthly_overtime_hours >= MONTHLY_OVERTIME_THRESHOLD_HOURS:
        return 0.0, overtime_hours

    # Sessionen korsar tröskeln
    hours_at_tier1 = MONTHLY_OVERTIME_THRESHOLD_HOURS - prior_monthly_overtime_hours
    return hours_at_tier1, overtime_hours - hours_at_tier1


def calculate_earnings(
    hours_worked: float,
    hourly_rate: float,
    is_holiday: bool,
    prior_monthly_overtime_hours: float,
) -> EarningsBreakdown:
    """
    Beräknar ersättning för ett arbetspass.

    Holiday sessions pay every hour at the holiday multiplier and have no
    regular/overtime split. Otherwise the first 8 hours are regular and the
    rest is overtime, paid at 1.25x while the month's running overtime stays
    within 60 hours and at 1.5x beyond that.

    No input validation happens here; negative hours or rates flow through
    into the result.

    Args:
        hours_worked: Worked hours of the session
        hourly_rate: Pay per regular hour
        is_holiday: Whether the session is on a holiday
        prior_monthly_overtime_hours: Overtime already stored this month,
            excluding this session

    Returns:
        EarningsBreakdown dict
    """
    regular_hours = 0.0
    overtime_hours = 0.0
    regular_earnings = 0.0
    overtime_earnings = 0.0
    holiday_earnings = 0.0

    if is_holiday:
        holiday_earnings = hours_worked * hourly_rate * HOLIDAY_MULTIPLIER
    elif hours_worked <= DAILY_REGULAR_HOURS_LIMIT:
        regular_hours = hours_worked
        regular_earnings = hours_worked * hourly_rate
    else:
        regular_hours = DAILY_REGULAR_HOURS_LIMIT
        regular_earnings = DAILY_REGULAR_HOURS_LIMIT * hourly_rate
        overtime_hours = hours_worked - DAILY_REGULAR_HOURS_LIMIT

        hours_at_tier1, hours_at_tier2 = split_overtime_tiers(overtime_hours, prior_monthly_overtime_hours)
        overtime_earnings = (
            hours_at_tier1 * hourly_rate * OVERTIME_MULTIPLIER_TIER1
            + hours_at_tier2 * hourly_rate * OVERTIME_MULTIPLIER_TIER2
        )

    return {
        "regular_hours": regular_hours,
        "overtime_hours": overtime_hours,
        "regular_earnings": regular_earnings,
        "overtime_earnings": overtime_earnings,
        "holiday_earnings": holiday_earnings,
        "total_earnings": regular_earnings + overtime_earnings + holiday_earnings,
    }

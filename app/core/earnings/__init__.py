"""
Earnings module - work-session hours, overtime tiers and period summaries.

Exports the public functions used by routes and tests.
"""

from .calculator import calculate_earnings, split_overtime_tiers
from .hours import compute_worked_hours
from .overtime import accumulated_overtime_hours, get_sessions_in_window
from .sessions import (
    add_work_session,
    get_monthly_stats,
    get_weekly_stats,
    get_yearly_data,
    list_work_sessions,
)
from .summary import summarize_period, weekly_breakdown, yearly_breakdown

__all__ = [
    # hours
    "compute_worked_hours",
    # overtime
    "accumulated_overtime_hours",
    "get_sessions_in_window",
    # calculator
    "calculate_earnings",
    "split_overtime_tiers",
    # summary
    "summarize_period",
    "weekly_breakdown",
    "yearly_breakdown",
    # sessions
    "add_work_session",
    "list_work_sessions",
    "get_weekly_stats",
    "get_monthly_stats",
    "get_yearly_data",
]

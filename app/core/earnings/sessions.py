"""
Work-session service: add sessions and build week/month/year reports.

Routes handle authentication and input validation; these functions assume
the owner is already resolved and the inputs are acceptable.
"""

from app.core.config import DEFAULT_LIST_LIMIT
from app.core.constants import MONTHS_PER_YEAR
from app.core.holidays import get_holidays_in_window, is_holiday_date
from app.core.logging_config import get_logger
from app.core.models import HolidayOut, WorkSessionOut
from app.core.sentry_config import add_breadcrumb
from app.core.time_utils import month_window, normalize_to_day, week_window, year_window
from app.core.types import PeriodSummary, YearlyData

from .calculator import calculate_earnings
from .hours import compute_worked_hours
from .overtime import accumulated_overtime_hours, get_sessions_in_window
from .summary import summarize_period, weekly_breakdown, yearly_breakdown

logger = get_logger(__name__)


def _with_records(summary: PeriodSummary, sessions, holidays) -> PeriodSummary:
    """Attach the window's sessions and holidays, serialized as the list endpoints return them."""
    summary["sessions"] = [WorkSessionOut.model_validate(s).model_dump() for s in sessions]
    summary["holidays"] = [HolidayOut.model_validate(h).model_dump() for h in holidays]
    return summary


def add_work_session(
    session,
    user_id: int,
    date: int,
    start_time: str,
    end_time: str,
    break_minutes: int,
    hourly_rate: float,
    description: str | None = None,
    is_holiday: bool | None = None,
):
    """
    Compute earnings for a new session and persist it.

    The holiday flag defaults to whether the holiday calendar has an entry
    on ``date``. Prior monthly overtime is read before the insert; other
    sessions of the month are left untouched.

    Returns:
        The stored WorkSession
    """
    from app.database.database import WorkSession

    date = normalize_to_day(date)

    if is_holiday is None:
        is_holiday = is_holiday_date(session, user_id, date)

    hours_worked = compute_worked_hours(start_time, end_time, break_minutes)
    prior_overtime = accumulated_overtime_hours(session, user_id, date)
    earnings = calculate_earnings(hours_worked, hourly_rate, is_holiday, prior_overtime)

    work_session = WorkSession(
        user_id=user_id,
        date=date,
        start_time=start_time,
        end_time=end_time,
        break_minutes=break_minutes,
        hourly_rate=hourly_rate,
        description=description or "",
        is_holiday=is_holiday,
        hours_worked=hours_worked,
        **earnings,
    )

    session.add(work_session)
    session.commit()
    session.refresh(work_session)

    logger.info(
        f"Work session {work_session.id} added for user {user_id}: "
        f"{hours_worked:.2f}h, earnings {earnings['total_earnings']:.2f}",
        extra={
            "extra_fields": {
                "user_id": user_id,
                "work_session_id": work_session.id,
                "is_holiday": is_holiday,
                "prior_monthly_overtime": prior_overtime,
                "overtime_hours": earnings["overtime_hours"],
            }
        },
    )
    add_breadcrumb(
        message=f"Work session {work_session.id} added",
        category="work_session",
        data={"user_id": user_id, "date": date},
    )

    return work_session


def list_work_sessions(
    session,
    user_id: int,
    start_date: int | None = None,
    end_date: int | None = None,
    limit: int = DEFAULT_LIST_LIMIT,
) -> list:
    """User's sessions newest first; both bounds inclusive and optional."""
    from app.database.database import WorkSession

    query = session.query(WorkSession).filter(WorkSession.user_id == user_id)
    if start_date is not None:
        query = query.filter(WorkSession.date >= start_date)
    if end_date is not None:
        query = query.filter(WorkSession.date <= end_date)
    return query.order_by(WorkSession.date.desc(), WorkSession.id.desc()).limit(limit).all()


def get_weekly_stats(session, user_id: int, week_start: int) -> PeriodSummary:
    """Summary over ``[week_start, week_start + 7 days)``."""
    start_ms, end_ms = week_window(week_start)
    sessions = get_sessions_in_window(session, user_id, start_ms, end_ms)
    holidays = get_holidays_in_window(session, user_id, start_ms, end_ms)
    return _with_records(summarize_period(sessions, holidays), sessions, holidays)


def get_monthly_stats(session, user_id: int, year: int, month: int) -> PeriodSummary:
    """
    Summary over a calendar month (1-12) with a weekly breakdown.

    Weeks are Sunday-aligned and may start in the previous month.
    """
    start_ms, end_ms = month_window(year, month)
    sessions = get_sessions_in_window(session, user_id, start_ms, end_ms)
    holidays = get_holidays_in_window(session, user_id, start_ms, end_ms)

    summary = summarize_period(sessions, holidays)
    summary["weekly_breakdown"] = weekly_breakdown(sessions)
    return _with_records(summary, sessions, holidays)


def get_yearly_data(session, user_id: int, year: int) -> YearlyData:
    """
    Month slots and year totals.

    Year totals are summed straight from the sessions, so they equal the
    sum of the twelve slots.
    """
    start_ms, end_ms = year_window(year)
    sessions = get_sessions_in_window(session, user_id, start_ms, end_ms)

    totals = summarize_period(sessions, [])
    total_work_days = totals["work_days"]
    total_earnings = totals["total_earnings"]

    return {
        "year": year,
        "monthly_data": yearly_breakdown(sessions),
        "total_hours": totals["total_hours"],
        "total_earnings": total_earnings,
        "total_regular_hours": totals["regular_hours"],
        "total_overtime_hours": totals["overtime_hours"],
        "total_work_days": total_work_days,
        "total_holiday_days": totals["holiday_days"],
        "average_hours_per_work_day": totals["average_hours_per_day"],
        "average_earnings_per_work_day": total_earnings / total_work_days if total_work_days > 0 else 0.0,
        "average_monthly_earnings": total_earnings / MONTHS_PER_YEAR,
    }

"""Monthly overtime accumulation and windowed session queries."""

from app.core.time_utils import month_window_for


def get_sessions_in_window(session, user_id: int, start_ms: int, end_ms: int) -> list:
    """
    All of a user's work sessions with ``start_ms <= date < end_ms``.

    Returns:
        Lista av WorkSession, newest first
    """
    if not session:
        return []

    from app.database.database import WorkSession

    return (
        session.query(WorkSession)
        .filter(
            WorkSession.user_id == user_id,
            WorkSession.date >= start_ms,
            WorkSession.date < end_ms,
        )
        .order_by(WorkSession.date.desc(), WorkSession.id.desc())
        .all()
    )


def accumulated_overtime_hours(session, user_id: int, reference_date: int) -> float:
    """
    Overtime hours already stored for the calendar month of ``reference_date``.

    Only persisted sessions count. The session being created has not been
    inserted yet, so the caller adds its overtime on top. Sessions deleted
    since earlier computations simply drop out of later sums.

    Args:
        session: SQLAlchemy session
        user_id: Owner of the sessions
        reference_date: Any instant in the month, epoch ms

    Returns:
        Summed overtime hours, unset values counted as 0
    """
    month_start, month_end = month_window_for(reference_date)
    month_sessions = get_sessions_in_window(session, user_id, month_start, month_end)
    return sum((s.overtime_hours or 0.0) for s in month_sessions)

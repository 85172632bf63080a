"""
Holiday calendar lookups.

Holidays are entered by each user; the earnings engine only reads them to
default a session's holiday flag.
"""

from app.core.time_utils import month_window


def find_holiday_on_date(session, user_id: int, date: int):
    """
    Holiday stored for exactly ``date`` (epoch ms day).

    Returns:
        Holiday eller None
    """
    if not session:
        return None

    from app.database.database import Holiday

    return session.query(Holiday).filter(Holiday.user_id == user_id, Holiday.date == date).first()


def is_holiday_date(session, user_id: int, date: int) -> bool:
    return find_holiday_on_date(session, user_id, date) is not None


def list_holidays(session, user_id: int, start_date: int | None = None, end_date: int | None = None) -> list:
    """User's holidays, both bounds inclusive and optional, oldest first."""
    if not session:
        return []

    from app.database.database import Holiday

    query = session.query(Holiday).filter(Holiday.user_id == user_id)
    if start_date is not None:
        query = query.filter(Holiday.date >= start_date)
    if end_date is not None:
        query = query.filter(Holiday.date <= end_date)
    return query.order_by(Holiday.date).all()


def get_holidays_in_window(session, user_id: int, start_ms: int, end_ms: int) -> list:
    """Holidays with ``start_ms <= date < end_ms``."""
    if not session:
        return []

    from app.database.database import Holiday

    return (
        session.query(Holiday)
        .filter(Holiday.user_id == user_id, Holiday.date >= start_ms, Holiday.date < end_ms)
        .order_by(Holiday.date)
        .all()
    )


def get_month_holidays(session, user_id: int, year: int, month: int) -> list:
    month_start, month_end = month_window(year, month)
    return get_holidays_in_window(session, user_id, month_start, month_end)

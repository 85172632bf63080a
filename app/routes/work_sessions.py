# app/routes/work_sessions.py
"""
Work session routes - add, list and delete sessions, week/month/year stats.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.auth.auth import get_current_user
from app.core.config import DEFAULT_LIST_LIMIT
from app.core.earnings import (
    add_work_session,
    get_monthly_stats,
    get_weekly_stats,
    get_yearly_data,
    list_work_sessions,
)
from app.core.logging_config import get_logger
from app.core.models import WorkSessionCreate, WorkSessionOut
from app.core.request_logging import log_security_event
from app.core.validators import validate_epoch_ms, validate_work_session_input, validate_year_month
from app.database.database import User, WorkSession, get_db

logger = get_logger(__name__)

router = APIRouter(prefix="/work-sessions", tags=["work_sessions"])


@router.get("", response_model=list[WorkSessionOut])
async def list_sessions(
    start_date: int | None = Query(None),
    end_date: int | None = Query(None),
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=1000),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Current user's sessions, newest first. Date bounds are inclusive."""
    return list_work_sessions(session, current_user.id, start_date, end_date, limit)


@router.post("", response_model=WorkSessionOut, status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: WorkSessionCreate,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Add a work session.

    Hours and earnings are computed here from the month's overtime so far.
    Without an explicit ``is_holiday`` the holiday calendar decides.
    """
    validate_epoch_ms(payload.date)
    validate_work_session_input(payload.start_time, payload.end_time, payload.break_minutes, payload.hourly_rate)

    return add_work_session(
        session,
        current_user.id,
        date=payload.date,
        start_time=payload.start_time.strip(),
        end_time=payload.end_time.strip(),
        break_minutes=payload.break_minutes,
        hourly_rate=payload.hourly_rate,
        description=payload.description,
        is_holiday=payload.is_holiday,
    )


@router.delete("/{session_id}")
async def delete_session(
    session_id: int,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a work session.

    Earnings of other sessions in the same month are not recomputed.
    """
    work_session = session.get(WorkSession, session_id)

    if not work_session or work_session.user_id != current_user.id:
        if work_session:
            log_security_event(
                "foreign_record_access",
                {"record": "work_session", "record_id": session_id, "user_id": current_user.id},
            )
        raise HTTPException(status_code=404, detail="Work session not found or unauthorized")

    session.delete(work_session)
    session.commit()

    logger.info(f"Work session {session_id} deleted by user {current_user.id}")
    return {"status": "deleted", "id": session_id}


@router.get("/stats/week")
async def weekly_stats(
    week_start: int = Query(..., description="Week start, epoch ms"),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Summary for the seven days starting at ``week_start``."""
    validate_epoch_ms(week_start, "week_start")
    return get_weekly_stats(session, current_user.id, week_start)


@router.get("/stats/month")
async def monthly_stats(
    year: int = Query(...),
    month: int = Query(..., description="Month 1-12"),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Summary for a calendar month with a weekly breakdown."""
    validate_year_month(year, month)
    return get_monthly_stats(session, current_user.id, year, month)


@router.get("/stats/year")
async def yearly_stats(
    year: int = Query(...),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Twelve month slots plus year totals."""
    validate_year_month(year)
    return get_yearly_data(session, current_user.id, year)

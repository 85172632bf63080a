# app/routes/holidays.py
"""
Holiday calendar routes - one holiday per user and date.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.auth.auth import get_current_user
from app.core.holidays import find_holiday_on_date, get_month_holidays, list_holidays
from app.core.logging_config import get_logger
from app.core.models import HolidayCreate, HolidayOut
from app.core.request_logging import log_security_event
from app.core.time_utils import normalize_to_day
from app.core.validators import validate_epoch_ms, validate_not_blank, validate_year_month
from app.database.database import Holiday, User, get_db

logger = get_logger(__name__)

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("", response_model=list[HolidayOut])
async def get_holidays(
    start_date: int | None = Query(None),
    end_date: int | None = Query(None),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Current user's holidays; bounds inclusive."""
    return list_holidays(session, current_user.id, start_date, end_date)


@router.post("", response_model=HolidayOut, status_code=status.HTTP_201_CREATED)
async def add_holiday(
    payload: HolidayCreate,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a holiday. A second holiday on the same date is rejected with 409."""
    name = validate_not_blank(payload.name, "name")
    date = normalize_to_day(validate_epoch_ms(payload.date))

    if find_holiday_on_date(session, current_user.id, date):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Holiday already exists for this date")

    holiday = Holiday(
        user_id=current_user.id,
        date=date,
        name=name,
        description=payload.description or "",
    )
    session.add(holiday)
    session.commit()
    session.refresh(holiday)

    logger.info(f"Holiday {holiday.id} ({name}) added by user {current_user.id}")
    return holiday


@router.get("/check", response_model=HolidayOut | None)
async def check_holiday(
    date: int = Query(..., description="Day, epoch ms"),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Holiday on ``date``, or null."""
    return find_holiday_on_date(session, current_user.id, normalize_to_day(validate_epoch_ms(date)))


@router.get("/month", response_model=list[HolidayOut])
async def month_holidays(
    year: int = Query(...),
    month: int = Query(..., description="Month 1-12"),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    validate_year_month(year, month)
    return get_month_holidays(session, current_user.id, year, month)


@router.delete("/{holiday_id}")
async def delete_holiday(
    holiday_id: int,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a holiday. Sessions already stored keep their holiday flag."""
    holiday = session.get(Holiday, holiday_id)

    if not holiday or holiday.user_id != current_user.id:
        if holiday:
            log_security_event(
                "foreign_record_access",
                {"record": "holiday", "record_id": holiday_id, "user_id": current_user.id},
            )
        raise HTTPException(status_code=404, detail="Holiday not found or unauthorized")

    session.delete(holiday)
    session.commit()
    return {"status": "deleted", "id": holiday_id}

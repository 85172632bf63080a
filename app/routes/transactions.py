# app/routes/transactions.py
"""
Transaction routes - income/expense entries, balance and category spending.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.auth.auth import get_current_user
from app.core.config import DEFAULT_LIST_LIMIT, DEFAULT_SPENDING_DAYS
from app.core.finance import get_balance, get_category_spending, now_ms
from app.core.models import TransactionCreate, TransactionOut
from app.core.request_logging import log_security_event
from app.core.validators import validate_amount, validate_epoch_ms, validate_not_blank
from app.database.database import Transaction, User, get_db

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=list[TransactionOut])
async def list_transactions(
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=1000),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Current user's transactions, newest first."""
    return (
        session.query(Transaction)
        .filter(Transaction.user_id == current_user.id)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
        .limit(limit)
        .all()
    )


@router.post("", response_model=TransactionOut, status_code=status.HTTP_201_CREATED)
async def add_transaction(
    payload: TransactionCreate,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a transaction; the date defaults to now."""
    validate_amount(payload.amount)

    transaction = Transaction(
        user_id=current_user.id,
        amount=payload.amount,
        description=payload.description,
        category=validate_not_blank(payload.category, "category"),
        type=payload.type,
        date=validate_epoch_ms(payload.date) if payload.date is not None else now_ms(),
    )
    session.add(transaction)
    session.commit()
    session.refresh(transaction)
    return transaction


@router.get("/balance")
async def balance(
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Income, expenses and balance over all transactions."""
    return get_balance(session, current_user.id)


@router.get("/category-spending")
async def category_spending(
    days: int = Query(DEFAULT_SPENDING_DAYS, ge=1),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Expense totals per category over the last ``days`` days."""
    return get_category_spending(session, current_user.id, days)


@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: int,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    transaction = session.get(Transaction, transaction_id)

    if not transaction or transaction.user_id != current_user.id:
        if transaction:
            log_security_event(
                "foreign_record_access",
                {"record": "transaction", "record_id": transaction_id, "user_id": current_user.id},
            )
        raise HTTPException(status_code=404, detail="Transaction not found or unauthorized")

    session.delete(transaction)
    session.commit()
    return {"status": "deleted", "id": transaction_id}

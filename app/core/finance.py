"""Transaktioner och kategorier: saldo, utgifter per kategori, standardkategorier."""

import time
from collections import defaultdict

from app.core.constants import (
    DEFAULT_CATEGORIES,
    MS_PER_DAY,
    TRANSACTION_TYPE_EXPENSE,
    TRANSACTION_TYPE_INCOME,
)
from app.core.logging_config import get_logger

logger = get_logger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def calculate_balance(transactions) -> dict:
    """
    Income, expenses and their difference.

    Returns:
        Dict med income, expenses, balance
    """
    income = sum(t.amount for t in transactions if t.type == TRANSACTION_TYPE_INCOME)
    expenses = sum(t.amount for t in transactions if t.type == TRANSACTION_TYPE_EXPENSE)
    return {"income": income, "expenses": expenses, "balance": income - expenses}


def calculate_category_spending(transactions) -> list[dict]:
    """Expense totals per category name, largest first; income is ignored."""
    totals: dict[str, float] = defaultdict(float)
    for t in transactions:
        if t.type == TRANSACTION_TYPE_EXPENSE:
            totals[t.category] += t.amount

    return [
        {"category": category, "amount": amount}
        for category, amount in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]


def get_balance(session, user_id: int) -> dict:
    from app.database.database import Transaction

    transactions = session.query(Transaction).filter(Transaction.user_id == user_id).all()
    return calculate_balance(transactions)


def get_category_spending(session, user_id: int, days: int, now: int | None = None) -> list[dict]:
    """Expense totals per category over the last ``days`` days."""
    from app.database.database import Transaction

    cutoff = (now if now is not None else now_ms()) - days * MS_PER_DAY
    transactions = (
        session.query(Transaction)
        .filter(Transaction.user_id == user_id, Transaction.date >= cutoff)
        .all()
    )
    return calculate_category_spending(transactions)


def initialize_default_categories(session, user_id: int) -> int:
    """
    Create the default category set for a user without categories.

    Users with at least one category are left untouched.

    Returns:
        Number of categories created
    """
    from app.database.database import Category

    if session.query(Category).filter(Category.user_id == user_id).first():
        return 0

    for name, category_type, color in DEFAULT_CATEGORIES:
        session.add(Category(user_id=user_id, name=name, type=category_type, color=color))
    session.commit()

    logger.info(f"Created {len(DEFAULT_CATEGORIES)} default categories for user {user_id}")
    return len(DEFAULT_CATEGORIES)

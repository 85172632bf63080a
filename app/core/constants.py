# app/core/constants.py

from typing import Final

# ==========================
# Veckostruktur / datum
# ==========================

#: Days per week. Used in loops instead of a literal 7.
DAYS_PER_WEEK: Final[int] = 7

#: Number of months per year; the yearly breakdown always has this many slots.
MONTHS_PER_YEAR: Final[int] = 12

#: Minutes per day. Added once when a shift crosses midnight.
MINUTES_PER_DAY: Final[int] = 24 * 60

#: Minutes per hour.
MINUTES_PER_HOUR: Final[int] = 60

#: Milliseconds per day. Dates travel as epoch-millisecond integers.
MS_PER_DAY: Final[int] = 24 * 60 * 60 * 1000


# ==========================
# Transaktioner / kategorier
# ==========================

#: Transaction and category kinds.
TRANSACTION_TYPE_INCOME: Final[str] = "income"
TRANSACTION_TYPE_EXPENSE: Final[str] = "expense"

#: Categories created for a user by the "defaults" endpoint.
#: Tuples of (name, type, color).
DEFAULT_CATEGORIES: Final[tuple[tuple[str, str, str], ...]] = (
    # Expense categories
    ("Food & Dining", TRANSACTION_TYPE_EXPENSE, "#ef4444"),
    ("Transportation", TRANSACTION_TYPE_EXPENSE, "#f97316"),
    ("Shopping", TRANSACTION_TYPE_EXPENSE, "#eab308"),
    ("Entertainment", TRANSACTION_TYPE_EXPENSE, "#22c55e"),
    ("Bills & Utilities", TRANSACTION_TYPE_EXPENSE, "#3b82f6"),
    ("Healthcare", TRANSACTION_TYPE_EXPENSE, "#8b5cf6"),
    ("Other", TRANSACTION_TYPE_EXPENSE, "#6b7280"),
    # Income categories
    ("Salary", TRANSACTION_TYPE_INCOME, "#10b981"),
    ("Freelance", TRANSACTION_TYPE_INCOME, "#06b6d4"),
    ("Investment", TRANSACTION_TYPE_INCOME, "#8b5cf6"),
    ("Other Income", TRANSACTION_TYPE_INCOME, "#6b7280"),
)

# app/core/config.py

from typing import Final


# ==========================
# Ordinarie tid / övertid
# ==========================

#: Number of hours per session paid at the plain hourly rate.
#: Anything above this on a non-holiday session is overtime.
DAILY_REGULAR_HOURS_LIMIT: Final[float] = 8.0

#: Monthly overtime threshold in hours.
#: Overtime up to this running monthly total is paid at the first tier,
#: overtime beyond it at the second tier.
MONTHLY_OVERTIME_THRESHOLD_HOURS: Final[float] = 60.0

#: Multiplier for overtime hours inside the monthly threshold.
OVERTIME_MULTIPLIER_TIER1: Final[float] = 1.25

#: Multiplier for overtime hours beyond the monthly threshold.
OVERTIME_MULTIPLIER_TIER2: Final[float] = 1.5

#: Multiplier for every hour of a session worked on a holiday.
#: Holiday status replaces the regular/overtime split entirely.
HOLIDAY_MULTIPLIER: Final[float] = 1.5


# ==========================
# Datum och tidformat
# ==========================

#: ISO date format, used for week keys in summaries.
DATE_FORMAT_ISO: Final[str] = "%Y-%m-%d"

#: Format for clock times on work sessions (for example "14:00").
TIME_FORMAT_HM: Final[str] = "%H:%M"


# ==========================
# Listor
# ==========================

#: Default number of records returned by list endpoints.
DEFAULT_LIST_LIMIT: Final[int] = 50

#: Default look-back window in days for category spending.
DEFAULT_SPENDING_DAYS: Final[int] = 30

# tests/test_work_sessions.py
"""
Tests for the work-session service against an in-memory database.

Covers monthly overtime accumulation, holiday defaulting, the
no-retroactive-recompute rule and the week/month/year reports.
"""

import pytest

from app.core.earnings import (
    accumulated_overtime_hours,
    add_work_session,
    get_monthly_stats,
    get_weekly_stats,
    get_yearly_data,
    list_work_sessions,
)
from app.database.database import Holiday, WorkSession

RATE = 20.0


def add(db, user, date, start="08:00", end="16:00", break_minutes=0, is_holiday=None, rate=RATE):
    return add_work_session(db, user.id, date, start, end, break_minutes, rate, "", is_holiday)


class TestMonthlyOvertimeAccumulator:
    def test_empty_month_is_zero(self, test_db, test_user, ms):
        assert accumulated_overtime_hours(test_db, test_user.id, ms(2025, 6, 15)) == 0.0

    def test_sums_only_same_month_and_owner(self, test_db, test_user, other_user, ms):
        add(test_db, test_user, ms(2025, 6, 2), "06:00", "18:00")  # 4h OT
        add(test_db, test_user, ms(2025, 6, 30), "06:00", "17:00")  # 3h OT
        add(test_db, test_user, ms(2025, 5, 31), "06:00", "18:00")  # previous month
        add(test_db, test_user, ms(2025, 7, 1), "06:00", "18:00")  # next month
        add(test_db, other_user, ms(2025, 6, 10), "06:00", "18:00")  # other user

        assert accumulated_overtime_hours(test_db, test_user.id, ms(2025, 6, 15)) == pytest.approx(7.0)

    def test_unset_overtime_counts_as_zero(self, test_db, test_user, ms):
        test_db.add(
            WorkSession(
                user_id=test_user.id,
                date=ms(2025, 6, 3),
                start_time="08:00",
                end_time="20:00",
                break_minutes=0,
                hourly_rate=RATE,
                hours_worked=12.0,
                total_earnings=240.0,
                overtime_hours=None,
            )
        )
        test_db.commit()

        assert accumulated_overtime_hours(test_db, test_user.id, ms(2025, 6, 20)) == 0.0


class TestAddWorkSession:
    def test_stores_computed_fields(self, test_db, test_user, ms):
        ws = add(test_db, test_user, ms(2025, 6, 2), "07:00", "18:00", break_minutes=60)

        assert ws.id is not None
        assert ws.hours_worked == pytest.approx(10.0)
        assert ws.regular_hours == pytest.approx(8.0)
        assert ws.overtime_hours == pytest.approx(2.0)
        assert ws.regular_earnings == pytest.approx(160.0)
        assert ws.overtime_earnings == pytest.approx(50.0)
        assert ws.holiday_earnings == 0.0
        assert ws.total_earnings == pytest.approx(210.0)
        assert ws.description == ""

    def test_date_is_normalized_to_local_midnight(self, test_db, test_user, ms):
        ws = add(test_db, test_user, ms(2025, 6, 2) + 9 * 60 * 60 * 1000)

        assert ws.date == ms(2025, 6, 2)

    def test_holiday_flag_defaults_from_calendar(self, test_db, test_user, ms):
        test_db.add(Holiday(user_id=test_user.id, date=ms(2025, 6, 6), name="National Day"))
        test_db.commit()

        ws = add(test_db, test_user, ms(2025, 6, 6), "08:00", "18:00")

        assert ws.is_holiday is True
        assert ws.holiday_earnings == pytest.approx(10 * RATE * 1.5)
        assert ws.overtime_hours == 0.0

    def test_explicit_flag_overrides_calendar(self, test_db, test_user, ms):
        test_db.add(Holiday(user_id=test_user.id, date=ms(2025, 6, 6), name="National Day"))
        test_db.commit()

        ws = add(test_db, test_user, ms(2025, 6, 6), is_holiday=False)

        assert ws.is_holiday is False
        assert ws.total_earnings == pytest.approx(8 * RATE)

    def test_other_users_holiday_is_ignored(self, test_db, test_user, other_user, ms):
        test_db.add(Holiday(user_id=other_user.id, date=ms(2025, 6, 6), name="Not mine"))
        test_db.commit()

        assert add(test_db, test_user, ms(2025, 6, 6)).is_holiday is False

    def test_overtime_tier_follows_month_history(self, test_db, test_user, ms):
        # Build up 58h of overtime before the session under test
        for day in range(1, 15):
            add(test_db, test_user, ms(2025, 6, day), "06:00", "18:00")  # 4h OT each -> 56h
        add(test_db, test_user, ms(2025, 6, 15), "08:00", "18:00")  # 2h OT -> 58h

        ws = add(test_db, test_user, ms(2025, 6, 16), "06:00", "20:00")  # 6h OT

        assert ws.overtime_hours == pytest.approx(6.0)
        assert ws.overtime_earnings == pytest.approx(2 * RATE * 1.25 + 4 * RATE * 1.5)

    def test_new_month_starts_over(self, test_db, test_user, ms):
        for day in range(1, 21):
            add(test_db, test_user, ms(2025, 6, day), "06:00", "18:00")  # 80h OT in June

        ws = add(test_db, test_user, ms(2025, 7, 1), "08:00", "18:00")

        assert ws.overtime_earnings == pytest.approx(2 * RATE * 1.25)

    def test_no_retroactive_recompute(self, test_db, test_user, ms):
        """Deleting earlier sessions leaves stored earnings of later ones alone."""
        for day in range(1, 16):
            add(test_db, test_user, ms(2025, 6, day), "06:00", "18:00")  # 60h OT
        late = add(test_db, test_user, ms(2025, 6, 20), "08:00", "18:00")
        assert late.overtime_earnings == pytest.approx(2 * RATE * 1.5)

        for ws in test_db.query(WorkSession).filter(WorkSession.id != late.id).all():
            test_db.delete(ws)
        test_db.commit()
        test_db.refresh(late)

        assert late.overtime_earnings == pytest.approx(2 * RATE * 1.5)
        # New sessions see the reduced baseline
        assert add(test_db, test_user, ms(2025, 6, 21), "08:00", "18:00").overtime_earnings == pytest.approx(
            2 * RATE * 1.25
        )


class TestListWorkSessions:
    def test_newest_first_with_inclusive_bounds(self, test_db, test_user, ms):
        for day in (1, 5, 10, 15):
            add(test_db, test_user, ms(2025, 6, day))

        sessions = list_work_sessions(test_db, test_user.id, ms(2025, 6, 5), ms(2025, 6, 10))

        assert [s.date for s in sessions] == [ms(2025, 6, 10), ms(2025, 6, 5)]

    def test_limit(self, test_db, test_user, ms):
        for day in range(1, 6):
            add(test_db, test_user, ms(2025, 6, day))

        assert len(list_work_sessions(test_db, test_user.id, limit=3)) == 3


class TestReports:
    def test_weekly_stats_window_is_half_open(self, test_db, test_user, ms):
        add(test_db, test_user, ms(2025, 6, 1))
        add(test_db, test_user, ms(2025, 6, 7), "08:00", "18:00")
        add(test_db, test_user, ms(2025, 6, 8))  # next week
        test_db.add(Holiday(user_id=test_user.id, date=ms(2025, 6, 6), name="National Day"))
        test_db.commit()

        stats = get_weekly_stats(test_db, test_user.id, ms(2025, 6, 1))

        assert stats["work_days"] == 2
        assert stats["total_hours"] == pytest.approx(18.0)
        assert stats["overtime_hours"] == pytest.approx(2.0)
        assert stats["total_holidays"] == 1
        assert stats["holiday_days"] == 0
        assert stats["average_hours_per_day"] == pytest.approx(9.0)
        assert [s["date"] for s in stats["sessions"]] == [ms(2025, 6, 7), ms(2025, 6, 1)]
        assert [h["name"] for h in stats["holidays"]] == ["National Day"]

    def test_weekly_stats_empty(self, test_db, test_user, ms):
        stats = get_weekly_stats(test_db, test_user.id, ms(2025, 6, 1))

        assert stats["work_days"] == 0
        assert stats["average_hours_per_day"] == 0.0

    def test_monthly_stats_with_weekly_breakdown(self, test_db, test_user, ms):
        add(test_db, test_user, ms(2025, 6, 2))
        add(test_db, test_user, ms(2025, 6, 9), is_holiday=True)
        add(test_db, test_user, ms(2025, 6, 10))
        add(test_db, test_user, ms(2025, 7, 1))  # outside
        test_db.add(Holiday(user_id=test_user.id, date=ms(2025, 6, 6), name="National Day"))
        test_db.add(Holiday(user_id=test_user.id, date=ms(2025, 7, 4), name="Outside"))
        test_db.commit()

        stats = get_monthly_stats(test_db, test_user.id, 2025, 6)

        assert stats["work_days"] == 3
        assert stats["holiday_days"] == 1
        assert stats["total_holidays"] == 1
        assert stats["total_earnings"] == pytest.approx(8 * RATE * 2 + 8 * RATE * 1.5)
        assert [w["week"] for w in stats["weekly_breakdown"]] == ["2025-06-01", "2025-06-08"]
        assert [w["days"] for w in stats["weekly_breakdown"]] == [1, 2]
        assert [s["date"] for s in stats["sessions"]] == [ms(2025, 6, 10), ms(2025, 6, 9), ms(2025, 6, 2)]
        assert stats["sessions"][1]["is_holiday"] is True
        assert [h["name"] for h in stats["holidays"]] == ["National Day"]
        assert stats["holidays"][0]["date"] == ms(2025, 6, 6)

    def test_yearly_slots_sum_to_year_totals(self, test_db, test_user, ms):
        add(test_db, test_user, ms(2025, 1, 15), "06:00", "18:00")
        add(test_db, test_user, ms(2025, 3, 3), is_holiday=True)
        add(test_db, test_user, ms(2025, 3, 4), "22:00", "07:30", break_minutes=30)
        add(test_db, test_user, ms(2025, 12, 31))
        add(test_db, test_user, ms(2026, 1, 1))  # next year

        data = get_yearly_data(test_db, test_user.id, 2025)
        slots = data["monthly_data"]

        assert len(slots) == 12
        assert data["total_work_days"] == 4
        assert sum(s["work_days"] for s in slots) == data["total_work_days"]
        assert sum(s["holiday_days"] for s in slots) == data["total_holiday_days"] == 1
        assert sum(s["total_hours"] for s in slots) == pytest.approx(data["total_hours"])
        assert sum(s["total_earnings"] for s in slots) == pytest.approx(data["total_earnings"])
        assert sum(s["regular_hours"] for s in slots) == pytest.approx(data["total_regular_hours"])
        assert sum(s["overtime_hours"] for s in slots) == pytest.approx(data["total_overtime_hours"])
        assert data["average_monthly_earnings"] == pytest.approx(data["total_earnings"] / 12)
        assert data["average_hours_per_work_day"] == pytest.approx(data["total_hours"] / 4)

    def test_yearly_data_empty_year(self, test_db, test_user):
        data = get_yearly_data(test_db, test_user.id, 2024)

        assert data["total_work_days"] == 0
        assert data["average_hours_per_work_day"] == 0.0
        assert data["average_earnings_per_work_day"] == 0.0
        assert data["average_monthly_earnings"] == 0.0

"""
Tests for worked-hours arithmetic and the epoch-ms calendar helpers.
"""

import datetime

import pytest

from app.core.constants import MS_PER_DAY
from app.core.earnings import compute_worked_hours
from app.core.time_utils import (
    local_date_to_ms,
    month_window,
    month_window_for,
    ms_to_local_date,
    normalize_to_day,
    parse_clock_time,
    sunday_week_start,
    week_window,
    year_window,
)


class TestComputeWorkedHours:
    def test_day_shift_with_break(self):
        assert compute_worked_hours("08:00", "16:30", 30) == pytest.approx(8.0)

    def test_overnight_shift(self):
        assert compute_worked_hours("22:00", "06:00", 30) == pytest.approx(7.5)

    def test_fractional_hours(self):
        assert compute_worked_hours("09:10", "17:25", 0) == pytest.approx(8.25)

    def test_equal_times_give_zero(self):
        assert compute_worked_hours("12:00", "12:00", 0) == 0.0

    def test_break_longer_than_shift_goes_negative(self):
        assert compute_worked_hours("10:00", "11:00", 90) == pytest.approx(-0.5)

    @pytest.mark.parametrize("bad", ["", "8", "25:00", "ab:cd", "12:60"])
    def test_malformed_time_raises(self, bad):
        with pytest.raises(ValueError):
            compute_worked_hours(bad, "16:00", 0)


class TestParseClockTime:
    def test_accepts_time_objects(self):
        assert parse_clock_time(datetime.time(7, 45)) == datetime.time(7, 45)

    def test_strips_whitespace(self):
        assert parse_clock_time(" 07:45 ") == datetime.time(7, 45)

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="Unsupported"):
            parse_clock_time(745, "start_time")


class TestWindows:
    def test_date_round_trip(self):
        day = datetime.date(2025, 3, 14)
        assert ms_to_local_date(local_date_to_ms(day)) == day

    def test_normalize_to_day_drops_time_of_day(self):
        midnight = local_date_to_ms(datetime.date(2025, 3, 14))
        assert normalize_to_day(midnight + 13 * 60 * 60 * 1000 + 5) == midnight

    def test_month_window_is_half_open(self):
        start, end = month_window(2025, 2)

        assert start == local_date_to_ms(datetime.date(2025, 2, 1))
        assert end == local_date_to_ms(datetime.date(2025, 3, 1))

    def test_december_rolls_into_next_year(self):
        _, end = month_window(2025, 12)
        assert end == local_date_to_ms(datetime.date(2026, 1, 1))

    def test_month_window_for_any_day_in_month(self):
        mid_month = local_date_to_ms(datetime.date(2025, 7, 19))
        assert month_window_for(mid_month) == month_window(2025, 7)

    def test_year_window(self):
        assert year_window(2024) == (
            local_date_to_ms(datetime.date(2024, 1, 1)),
            local_date_to_ms(datetime.date(2025, 1, 1)),
        )

    def test_week_window_is_seven_days(self):
        start = local_date_to_ms(datetime.date(2025, 6, 1))
        assert week_window(start) == (start, start + 7 * MS_PER_DAY)

    @pytest.mark.parametrize(
        "day, expected",
        [
            (datetime.date(2025, 6, 1), datetime.date(2025, 6, 1)),  # Sunday
            (datetime.date(2025, 6, 2), datetime.date(2025, 6, 1)),  # Monday
            (datetime.date(2025, 6, 7), datetime.date(2025, 6, 1)),  # Saturday
            (datetime.date(2025, 3, 1), datetime.date(2025, 2, 23)),  # crosses month
        ],
    )
    def test_sunday_week_start(self, day, expected):
        assert sunday_week_start(day) == expected

"""
Tests for the HTTP 400 input validators.
"""

import pytest
from fastapi import HTTPException

from app.core.validators import validate_epoch_ms, validate_year_month


class TestValidateEpochMs:
    def test_accepts_calendar_day(self, ms):
        assert validate_epoch_ms(ms(2025, 6, 2)) == ms(2025, 6, 2)

    @pytest.mark.parametrize("value", [10**17, -(10**17), 10**30])
    def test_unrepresentable_values_give_400(self, value):
        with pytest.raises(HTTPException) as exc_info:
            validate_epoch_ms(value, "week_start")

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid week_start"

    def test_years_before_1970_rejected(self, ms):
        with pytest.raises(HTTPException):
            validate_epoch_ms(ms(1969, 6, 1))


class TestValidateYearMonth:
    @pytest.mark.parametrize("year, month", [(2025, 0), (2025, 13), (1969, 1)])
    def test_rejects(self, year, month):
        with pytest.raises(HTTPException):
            validate_year_month(year, month)

    def test_year_only(self):
        validate_year_month(2025)

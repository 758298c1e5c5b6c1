"""Tests for calendar arithmetic."""

import pytest
from datetime import date, timedelta

from ellenplanner.engine.calendar import (
    add_days,
    business_index,
    date_for,
    day_name,
    enumerate_business_days,
    enumerate_days,
    is_date_in_range,
    is_weekend,
    next_business_day,
    skip_weekend,
    week_start,
    weekday_index,
)
from conftest import MONDAY, FRIDAY, SATURDAY, SUNDAY, NEXT_MONDAY, WEDNESDAY


class TestWeekStart:
    """Test week_start() normalization."""

    def test_monday_is_its_own_week_start(self):
        assert week_start(MONDAY) == MONDAY

    def test_midweek_maps_to_monday(self):
        assert week_start(WEDNESDAY) == MONDAY
        assert week_start(FRIDAY) == MONDAY

    def test_sunday_belongs_to_previous_monday(self):
        """Sunday closes the week that started the Monday before it."""
        assert week_start(SUNDAY) == MONDAY
        assert week_start(SATURDAY) == MONDAY

    def test_crosses_month_and_year_boundary(self):
        assert week_start(date(2023, 12, 31)) == date(2023, 12, 25)
        assert week_start(date(2024, 3, 1)) == date(2024, 2, 26)

    def test_idempotent(self):
        d = date(2024, 2, 15)
        for offset in range(14):
            day = d + timedelta(days=offset)
            assert week_start(week_start(day)) == week_start(day)


class TestDayIndexes:
    """Test weekday and business day indexing."""

    def test_weekday_index_folds_sunday_to_six(self):
        assert weekday_index(MONDAY) == 0
        assert weekday_index(SATURDAY) == 5
        assert weekday_index(SUNDAY) == 6

    def test_business_index_monday_to_friday(self):
        assert [business_index(MONDAY + timedelta(days=i)) for i in range(5)] == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize("day", [SATURDAY, SUNDAY])
    def test_business_index_rejects_weekend(self, day):
        with pytest.raises(ValueError):
            business_index(day)

    def test_is_weekend(self):
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)
        assert not is_weekend(MONDAY)
        assert not is_weekend(FRIDAY)

    def test_date_for_inverts_week_and_index(self):
        assert date_for(week_start(FRIDAY), business_index(FRIDAY)) == FRIDAY

    def test_day_name(self):
        assert day_name(0) == "Maandag"
        assert day_name(4) == "Vrijdag"
        assert day_name(5) == ""


class TestDayRanges:
    """Test day enumeration helpers."""

    def test_enumerate_days_inclusive(self):
        days = enumerate_days(FRIDAY, NEXT_MONDAY)
        assert days == [FRIDAY, SATURDAY, SUNDAY, NEXT_MONDAY]

    def test_enumerate_days_single_day(self):
        assert enumerate_days(MONDAY, MONDAY) == [MONDAY]

    def test_enumerate_days_empty_when_reversed(self):
        assert enumerate_days(NEXT_MONDAY, MONDAY) == []

    def test_enumerate_business_days_skips_weekend(self):
        assert enumerate_business_days(FRIDAY, NEXT_MONDAY) == [FRIDAY, NEXT_MONDAY]

    def test_next_business_day_skips_weekend(self):
        assert next_business_day(FRIDAY) == NEXT_MONDAY
        assert next_business_day(SATURDAY) == NEXT_MONDAY
        assert next_business_day(MONDAY) == MONDAY + timedelta(days=1)

    def test_skip_weekend(self):
        assert skip_weekend(SATURDAY) == NEXT_MONDAY
        assert skip_weekend(FRIDAY) == FRIDAY

    def test_add_days_and_range(self):
        assert add_days(FRIDAY, 3) == NEXT_MONDAY
        assert is_date_in_range(WEDNESDAY, MONDAY, FRIDAY)
        assert is_date_in_range(MONDAY, MONDAY, FRIDAY)
        assert not is_date_in_range(SATURDAY, MONDAY, FRIDAY)

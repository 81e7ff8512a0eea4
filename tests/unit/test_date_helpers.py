"""Tests for trip date arithmetic and the calendar grid."""

import pytest
from datetime import date

from tripnest.utils.date_helpers import DateHelpers
from tripnest.utils.validation import ValidationHelpers


@pytest.mark.unit
class TestTripDuration:
    def test_single_day_trip_lasts_one_day(self):
        assert DateHelpers.trip_duration_days(date(2024, 5, 1), date(2024, 5, 1)) == 1

    def test_both_ends_are_counted(self):
        assert DateHelpers.trip_duration_days(date(2024, 5, 1), date(2024, 5, 5)) == 5

    def test_across_month_boundary(self):
        assert (
            DateHelpers.trip_duration_days(date(2024, 1, 30), date(2024, 2, 2)) == 4
        )

    def test_day_within_is_inclusive(self):
        start, end = date(2024, 5, 1), date(2024, 5, 3)

        assert DateHelpers.is_day_within(date(2024, 5, 1), start, end)
        assert DateHelpers.is_day_within(date(2024, 5, 3), start, end)
        assert not DateHelpers.is_day_within(date(2024, 4, 30), start, end)
        assert not DateHelpers.is_day_within(date(2024, 5, 4), start, end)


@pytest.mark.unit
class TestTripStatus:
    today = date(2024, 6, 15)

    def test_upcoming_trip_counts_days(self):
        result = DateHelpers.get_trip_status(
            date(2024, 6, 20), date(2024, 6, 25), today=self.today
        )

        assert result == {"status": "upcoming", "days_until": 5}

    def test_trip_starting_tomorrow(self):
        result = DateHelpers.get_trip_status(
            date(2024, 6, 16), date(2024, 6, 16), today=self.today
        )

        assert result["days_until"] == 1

    def test_ongoing_on_first_and_last_day(self):
        first = DateHelpers.get_trip_status(
            date(2024, 6, 15), date(2024, 6, 18), today=self.today
        )
        last = DateHelpers.get_trip_status(
            date(2024, 6, 10), date(2024, 6, 15), today=self.today
        )

        assert first == {"status": "ongoing", "days_until": 0}
        assert last == {"status": "ongoing", "days_until": 0}

    def test_completed_trip_has_no_countdown(self):
        result = DateHelpers.get_trip_status(
            date(2024, 6, 1), date(2024, 6, 14), today=self.today
        )

        assert result == {"status": "completed", "days_until": None}


@pytest.mark.unit
class TestCalendarGrid:
    def test_grid_starts_on_monday_and_ends_on_sunday(self):
        days = DateHelpers.get_calendar_grid_days(2024, 5)

        assert days[0].weekday() == 0
        assert days[-1].weekday() == 6
        assert len(days) % 7 == 0

    def test_may_2024_padding(self):
        # 1 May 2024 is a Wednesday, 31 May a Friday
        days = DateHelpers.get_calendar_grid_days(2024, 5)

        assert days[0] == date(2024, 4, 29)
        assert days[-1] == date(2024, 6, 2)
        assert len(days) == 35

    def test_month_starting_on_monday_has_no_leading_padding(self):
        # 1 April 2024 is a Monday
        days = DateHelpers.get_calendar_grid_days(2024, 4)

        assert days[0] == date(2024, 4, 1)

    def test_february_2021_fits_four_weeks(self):
        days = DateHelpers.get_calendar_grid_days(2021, 2)

        assert len(days) == 28

    def test_shift_month_wraps_years(self):
        assert DateHelpers.shift_month(2024, 1, -1) == (2023, 12)
        assert DateHelpers.shift_month(2024, 12, 1) == (2025, 1)
        assert DateHelpers.shift_month(2024, 6, 1) == (2024, 7)


@pytest.mark.unit
class TestDateRangeValidation:
    def test_end_before_start_is_rejected(self):
        error = ValidationHelpers.validate_date_range(date(2024, 5, 5), date(2024, 5, 4))

        assert error == "End date must be on or after start date"

    def test_same_day_is_allowed(self):
        assert (
            ValidationHelpers.validate_date_range(date(2024, 5, 5), date(2024, 5, 5))
            is None
        )

    def test_overly_long_trip_is_rejected(self):
        error = ValidationHelpers.validate_date_range(date(2024, 1, 1), date(2025, 6, 1))

        assert error is not None

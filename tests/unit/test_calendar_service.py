"""Tests for the month grid and yearly statistics."""

import pytest
from datetime import date
from decimal import Decimal

from tripnest.schemas.expense import ExpenseCreate
from tripnest.services.calendar_service import CalendarService
from tripnest.services.errors import BusinessRuleViolationError
from tripnest.services.expense_service import ExpenseService
from tripnest.utils.constants import AppConstants


def day_entry(month, day):
    return next(d for d in month["days"] if d["date"] == day)


@pytest.mark.unit
class TestCalendarMonth:
    def test_trip_spans_days_with_start_and_end_flags(
        self, db, owner, household, make_ctx, make_trip
    ):
        trip = make_trip(owner, start=date(2030, 5, 30), end=date(2030, 6, 2))

        month = CalendarService(db).get_month(
            make_ctx(owner), 2030, 5, today=date(2030, 5, 15)
        )

        first = day_entry(month, date(2030, 5, 30))["trips"]
        assert [t["id"] for t in first] == [trip.id]
        assert first[0]["is_start"] is True
        assert first[0]["is_end"] is False

        # 2 June is on the trailing padding of the May grid
        last_day = day_entry(month, date(2030, 6, 2))
        assert last_day["in_current_month"] is False
        assert last_day["trips"][0]["is_end"] is True

        assert day_entry(month, date(2030, 5, 29))["trips"] == []
        assert day_entry(month, date(2030, 5, 15))["is_today"] is True

    def test_colors_follow_trip_order_and_cycle(
        self, db, owner, household, make_ctx, make_trip
    ):
        colors = AppConstants.CALENDAR_TRIP_COLORS
        for offset in range(len(colors) + 1):
            make_trip(
                owner,
                name=f"Trip {offset}",
                start=date(2030, 1, 1 + offset),
                end=date(2030, 1, 1 + offset),
            )

        month = CalendarService(db).get_month(make_ctx(owner), 2030, 1)

        legend = month["legend"]
        assert [entry["color"] for entry in legend[: len(colors)]] == colors
        assert legend[len(colors)]["color"] == colors[0]

    def test_navigation_and_title(self, db, owner, household, make_ctx):
        month = CalendarService(db).get_month(make_ctx(owner), 2030, 1)

        assert month["title"] == "January 2030"
        assert month["previous"] == {"year": 2029, "month": 12}
        assert month["next"] == {"year": 2030, "month": 2}


@pytest.mark.unit
class TestYearlyStats:
    def test_counts_trips_starting_in_year(
        self, db, owner, household, make_ctx, make_trip
    ):
        ctx = make_ctx(owner)
        new_year = make_trip(owner, name="NYE", start=date(2029, 12, 30), end=date(2030, 1, 2))
        spring = make_trip(owner, name="Spring", start=date(2030, 4, 1), end=date(2030, 4, 3))
        expenses = ExpenseService(db)
        expenses.create_expense(
            ctx, new_year.id, ExpenseCreate(amount=Decimal("40"), category="food", date=date(2030, 1, 1))
        )
        expenses.create_expense(
            ctx, spring.id, ExpenseCreate(amount=Decimal("200"), category="hotels", date=date(2030, 4, 1))
        )
        expenses.create_expense(
            ctx, spring.id, ExpenseCreate(amount=Decimal("12.5"), category="food", date=date(2030, 4, 2))
        )

        stats = CalendarService(db).get_yearly_stats(ctx, 2030)

        assert [t.name for t in stats["trips"]] == ["Spring"]
        assert stats["total_trips"] == 1
        assert stats["total_spent"] == 212.5
        assert stats["by_category"] == {"hotels": 200.0, "food": 12.5}

    def test_empty_year(self, db, owner, household, make_ctx):
        stats = CalendarService(db).get_yearly_stats(make_ctx(owner), 2031)

        assert stats["total_trips"] == 0
        assert stats["total_spent"] == 0.0
        assert stats["by_category"] == {}


@pytest.mark.unit
class TestCalendarBounds:
    def test_supported_boundary_months(self):
        first = CalendarService.build_month([], AppConstants.CALENDAR_MIN_YEAR, 1)
        last = CalendarService.build_month([], AppConstants.CALENDAR_MAX_YEAR, 12)

        assert first["previous"] == {"year": 1, "month": 12}
        assert last["next"] == {"year": 9999, "month": 1}
        assert last["days"][-1]["date"].weekday() == 6

    @pytest.mark.parametrize("year,month", [(1, 1), (9999, 12), (2030, 13)])
    def test_out_of_range_month_is_rejected(self, year, month):
        with pytest.raises(BusinessRuleViolationError):
            CalendarService.build_month([], year, month)

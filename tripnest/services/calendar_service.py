from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from datetime import date
from ..models.trip import Trip
from ..utils.constants import AppConstants
from ..utils.date_helpers import DateHelpers
from ..utils.service_helpers import round_currency, totals_by_category
from .access_policy import AccessPolicy, HouseholdAccessPolicy
from .context import RequestContext
from .errors import BusinessRuleViolationError
from .trip_service import TripService


class CalendarService:
    def __init__(self, db: Session, policy: AccessPolicy = None):
        self.db = db
        self.policy = policy or HouseholdAccessPolicy(db)
        self.trip_service = TripService(db, self.policy)

    def get_month(
        self,
        ctx: RequestContext,
        year: int,
        month: int,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Month grid of the household's trips"""
        trips = self.trip_service.list_trips(ctx)
        return self.build_month(trips, year, month, today)

    def get_yearly_stats(self, ctx: RequestContext, year: int) -> Dict[str, Any]:
        """Trips starting in the given year and what was spent on them"""
        year_start, year_end = DateHelpers.get_year_boundaries(year)
        trips = self.trip_service.get_trips_starting_between(ctx, year_start, year_end)

        all_expenses = [expense for trip in trips for expense in trip.expenses]

        return {
            "year": year,
            "trips": trips,
            "total_trips": len(trips),
            "total_spent": round_currency(sum(e.amount for e in all_expenses)),
            "by_category": totals_by_category(all_expenses),
        }

    @staticmethod
    def build_month(
        trips: List[Trip], year: int, month: int, today: Optional[date] = None
    ) -> Dict[str, Any]:
        """Lay trips out on a Monday-first month grid.

        Colours are assigned by the trip's position in ``trips`` so a trip keeps
        its colour when the user moves between months.
        """
        if not (
            AppConstants.CALENDAR_MIN_YEAR <= year <= AppConstants.CALENDAR_MAX_YEAR
        ) or not 1 <= month <= 12:
            raise BusinessRuleViolationError(
                f"Calendar month {year}-{month} is out of range"
            )

        today = today or date.today()
        colors = AppConstants.CALENDAR_TRIP_COLORS
        trip_colors = {
            trip.id: colors[index % len(colors)] for index, trip in enumerate(trips)
        }

        days = []
        visible = set()
        for day in DateHelpers.get_calendar_grid_days(year, month):
            day_trips = [
                {
                    "id": trip.id,
                    "name": trip.name,
                    "destination": trip.destination,
                    "start_date": trip.start_date,
                    "end_date": trip.end_date,
                    "notes": trip.notes,
                    "color": trip_colors[trip.id],
                    "is_start": day == trip.start_date,
                    "is_end": day == trip.end_date,
                }
                for trip in trips
                if DateHelpers.is_day_within(day, trip.start_date, trip.end_date)
            ]
            visible.update(t["id"] for t in day_trips)
            days.append(
                {
                    "date": day,
                    "in_current_month": day.month == month and day.year == year,
                    "is_today": day == today,
                    "trips": day_trips,
                }
            )

        previous_year, previous_month = DateHelpers.shift_month(year, month, -1)
        next_year, next_month = DateHelpers.shift_month(year, month, 1)

        return {
            "year": year,
            "month": month,
            "title": date(year, month, 1).strftime("%B %Y"),
            "days": days,
            "legend": [
                {"trip_id": trip.id, "name": trip.name, "color": trip_colors[trip.id]}
                for trip in trips
                if trip.id in visible
            ],
            "previous": {"year": previous_year, "month": previous_month},
            "next": {"year": next_year, "month": next_month},
        }

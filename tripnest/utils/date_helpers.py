from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple
from dateutil.relativedelta import relativedelta
import calendar

from ..models.enums import TripStatus


class DateHelpers:
    @staticmethod
    def trip_duration_days(start_date: date, end_date: date) -> int:
        """Number of calendar days a trip occupies, both ends included"""
        return (end_date - start_date).days + 1

    @staticmethod
    def is_day_within(day: date, start_date: date, end_date: date) -> bool:
        return start_date <= day <= end_date

    @staticmethod
    def get_month_boundaries(year: int, month: int) -> Tuple[date, date]:
        """Get first and last day of a given month"""
        last_day = calendar.monthrange(year, month)[1]
        return date(year, month, 1), date(year, month, last_day)

    @staticmethod
    def get_week_boundaries(target_date: date) -> Tuple[date, date]:
        """Get start (Monday) and end (Sunday) of week containing target_date"""
        start_of_week = target_date - timedelta(days=target_date.weekday())
        return start_of_week, start_of_week + timedelta(days=6)

    @staticmethod
    def get_calendar_grid_days(year: int, month: int) -> List[date]:
        """All days shown on a month grid, padded to whole Monday-Sunday weeks"""
        month_start, month_end = DateHelpers.get_month_boundaries(year, month)
        grid_start, _ = DateHelpers.get_week_boundaries(month_start)
        _, grid_end = DateHelpers.get_week_boundaries(month_end)

        return [
            grid_start + timedelta(days=offset)
            for offset in range((grid_end - grid_start).days + 1)
        ]

    @staticmethod
    def shift_month(year: int, month: int, months: int) -> Tuple[int, int]:
        shifted = date(year, month, 1) + relativedelta(months=months)
        return shifted.year, shifted.month

    @staticmethod
    def get_trip_status(
        start_date: date, end_date: date, today: Optional[date] = None
    ) -> Dict[str, Optional[int]]:
        """Classify a trip relative to today"""
        today = today or date.today()

        if end_date < today:
            return {"status": TripStatus.COMPLETED.value, "days_until": None}
        if start_date > today:
            return {
                "status": TripStatus.UPCOMING.value,
                "days_until": (start_date - today).days,
            }
        return {"status": TripStatus.ONGOING.value, "days_until": 0}

    @staticmethod
    def get_year_boundaries(year: int) -> Tuple[date, date]:
        return date(year, 1, 1), date(year, 12, 31)

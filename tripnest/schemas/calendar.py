import datetime as dt
from pydantic import BaseModel
from typing import Dict, List, Optional
from .trip import TripResponse


class CalendarTrip(BaseModel):
    id: int
    name: str
    destination: str
    start_date: dt.date
    end_date: dt.date
    notes: Optional[str] = None
    color: str
    is_start: bool
    is_end: bool


class CalendarDay(BaseModel):
    date: dt.date
    in_current_month: bool
    is_today: bool
    trips: List[CalendarTrip]


class CalendarLegendEntry(BaseModel):
    trip_id: int
    name: str
    color: str


class MonthRef(BaseModel):
    year: int
    month: int


class CalendarMonth(BaseModel):
    year: int
    month: int
    title: str
    days: List[CalendarDay]
    legend: List[CalendarLegendEntry]
    previous: MonthRef
    next: MonthRef


class YearlyStats(BaseModel):
    year: int
    trips: List[TripResponse]
    total_trips: int
    total_spent: float
    by_category: Dict[str, float]

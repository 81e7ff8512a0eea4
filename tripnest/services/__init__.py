from .calendar_service import CalendarService
from .checklist_service import ChecklistService
from .context import RequestContext
from .expense_service import ExpenseService
from .household_service import HouseholdService
from .trip_service import TripService

__all__ = [
    "CalendarService",
    "ChecklistService",
    "RequestContext",
    "ExpenseService",
    "HouseholdService",
    "TripService",
]

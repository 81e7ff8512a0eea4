from .household import (
    HouseholdCreate,
    HouseholdUpdate,
    HouseholdResponse,
    HouseholdInvitation,
    InviteAccept,
)
from .household_membership import (
    HouseholdMemberResponse,
    PendingInviteResponse,
    UserHouseholdResponse,
)
from .trip import TripCreate, TripUpdate, TripResponse, TripDetailResponse
from .expense import (
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
    ExpenseSummary,
    ExpenseDateGroup,
)
from .checklist import (
    ChecklistCreate,
    ChecklistUpdate,
    ChecklistResponse,
    ChecklistItemCreate,
    ChecklistItemUpdate,
    ChecklistItemResponse,
)
from .calendar import CalendarMonth, CalendarDay, CalendarTrip, YearlyStats
from .common import ConfigOption

__all__ = [
    "HouseholdCreate",
    "HouseholdUpdate",
    "HouseholdResponse",
    "HouseholdInvitation",
    "InviteAccept",
    "HouseholdMemberResponse",
    "PendingInviteResponse",
    "UserHouseholdResponse",
    "TripCreate",
    "TripUpdate",
    "TripResponse",
    "TripDetailResponse",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    "ExpenseSummary",
    "ExpenseDateGroup",
    "ChecklistCreate",
    "ChecklistUpdate",
    "ChecklistResponse",
    "ChecklistItemCreate",
    "ChecklistItemUpdate",
    "ChecklistItemResponse",
    "CalendarMonth",
    "CalendarDay",
    "CalendarTrip",
    "YearlyStats",
    "ConfigOption",
]

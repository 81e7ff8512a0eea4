from .user import User
from .household import Household
from .household_membership import HouseholdMember
from .trip import Trip
from .expense import Expense
from .checklist import Checklist, ChecklistItem


__all__ = [
    "User",
    "Household",
    "HouseholdMember",
    "Trip",
    "Expense",
    "Checklist",
    "ChecklistItem",
]

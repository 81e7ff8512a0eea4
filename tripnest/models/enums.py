from enum import Enum


class HouseholdRole(str, Enum):
    OWNER = "owner"
    MEMBER = "member"


class MembershipStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"


class ExpenseCategory(str, Enum):
    FLIGHTS = "flights"
    HOTELS = "hotels"
    FOOD = "food"
    ACTIVITIES = "activities"
    TRANSPORT = "transport"
    OTHER = "other"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CZK = "CZK"
    PLN = "PLN"


class TripStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"

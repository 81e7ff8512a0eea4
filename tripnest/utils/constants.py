class AppConstants:
    # Validation Limits
    MAX_EXPENSE_AMOUNT = 1_000_000.00
    MAX_TRIP_DAYS = 366

    # Financial
    DEFAULT_EXPENSE_CURRENCY = "CZK"
    DEFAULT_SUMMARY_CURRENCY = "EUR"

    # Calendar (month grids spill into the neighbouring years)
    CALENDAR_MIN_YEAR = 2
    CALENDAR_MAX_YEAR = 9998
    CALENDAR_TRIP_COLORS = [
        "blue",
        "green",
        "purple",
        "orange",
        "pink",
        "teal",
        "indigo",
        "rose",
    ]


class CategoryMetadata:
    EXPENSE_CATEGORIES = {
        "flights": {"label": "Flights", "emoji": "✈️"},
        "hotels": {"label": "Hotels", "emoji": "🏨"},
        "food": {"label": "Food", "emoji": "🍽️"},
        "activities": {"label": "Activities", "emoji": "🎯"},
        "transport": {"label": "Transport", "emoji": "🚗"},
        "other": {"label": "Other", "emoji": "📦"},
    }

    CURRENCIES = {
        "USD": "USD ($)",
        "EUR": "EUR (€)",
        "GBP": "GBP (£)",
        "CZK": "CZK (Kč)",
        "PLN": "PLN (zł)",
    }


class Messages:
    INVALID_INVITE_CODE = "Invalid invite code"
    NO_HOUSEHOLD = "User must be a member of a household"
    ALREADY_IN_HOUSEHOLD = "User is already a member of a household"
    NOT_AUTHENTICATED = "Not authenticated"
    INVALID_DATE_RANGE = "End date must be on or after start date"

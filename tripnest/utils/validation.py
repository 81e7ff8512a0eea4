import re
from datetime import date
from decimal import Decimal
from typing import Optional
from .constants import AppConstants, Messages


class ValidationHelpers:
    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format"""
        pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
        return re.match(pattern, email) is not None

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def validate_amount(
        amount, max_amount: float = AppConstants.MAX_EXPENSE_AMOUNT
    ) -> bool:
        """Validate monetary amount (zero is allowed)"""
        return Decimal("0") <= Decimal(str(amount)) <= Decimal(str(max_amount))

    @staticmethod
    def validate_date_range(start_date: date, end_date: date) -> Optional[str]:
        """Return an error message when the range is not usable for a trip"""
        if not start_date or not end_date:
            return "Start and end dates are required"

        if end_date < start_date:
            return Messages.INVALID_DATE_RANGE

        if (end_date - start_date).days + 1 > AppConstants.MAX_TRIP_DAYS:
            return f"Trip cannot be longer than {AppConstants.MAX_TRIP_DAYS} days"

        return None

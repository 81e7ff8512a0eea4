from .date_helpers import DateHelpers
from .constants import AppConstants, CategoryMetadata, Messages
from .validation import ValidationHelpers

__all__ = [
    "DateHelpers",
    "AppConstants",
    "CategoryMetadata",
    "Messages",
    "ValidationHelpers",
]

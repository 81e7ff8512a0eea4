# tripnest/routers/__init__.py

# Import all router modules to make them available
from . import auth
from . import households
from . import trips
from . import expenses
from . import checklists
from . import calendar

__all__ = [
    "auth",
    "households",
    "trips",
    "expenses",
    "checklists",
    "calendar",
]

# tripnest/dependencies/__init__.py

from .permissions import get_request_context, get_current_user

__all__ = [
    "get_request_context",
    "get_current_user",
]

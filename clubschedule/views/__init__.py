"""Client-side view-models driving the admin and public pages."""

from .admin import AdminState, AdminView
from .cache import InMemoryListCache, ListCache
from .public import PublicScheduleView

__all__ = [
    "AdminState",
    "AdminView",
    "InMemoryListCache",
    "ListCache",
    "PublicScheduleView",
]

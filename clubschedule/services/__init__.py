"""Service layer helpers."""

from .navigation import NAV_LINKS, NavigationMenu, navigation_tree
from .schedules import ScheduleStore, normalize_fields, schedule_to_dict

__all__ = [
    "NAV_LINKS",
    "NavigationMenu",
    "ScheduleStore",
    "navigation_tree",
    "normalize_fields",
    "schedule_to_dict",
]

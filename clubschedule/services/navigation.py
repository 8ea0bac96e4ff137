"""Site navigation entries and menu state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class NavLink:
    id: int
    title: str
    href: str
    children: Tuple["NavLink", ...] = ()

    @property
    def has_dropdown(self) -> bool:
        return bool(self.children)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "href": self.href,
            "children": [child.to_dict() for child in self.children],
        }


NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink(1, "Home", "/"),
    NavLink(
        2,
        "Schedule",
        "/schedule",
        children=(
            NavLink(21, "All Events", "/schedule"),
            NavLink(22, "Tournaments", "/schedule?event_type=tournament"),
            NavLink(23, "Open Gym", "/schedule?event_type=open_gym"),
        ),
    ),
    NavLink(3, "Photos", "/photos"),
)


@dataclass
class NavigationMenu:
    """Mobile menu toggle and the currently expanded dropdown."""

    links: Tuple[NavLink, ...] = NAV_LINKS
    open: bool = False
    expanded: Optional[int] = None
    _by_id: Dict[int, NavLink] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {link.id: link for link in self.links}

    def toggle(self) -> bool:
        self.open = not self.open
        if not self.open:
            self.expanded = None
        return self.open

    def close(self) -> None:
        self.open = False
        self.expanded = None

    def toggle_dropdown(self, link_id: int) -> Optional[int]:
        link = self._by_id.get(link_id)
        if link is None or not link.has_dropdown:
            return self.expanded
        self.expanded = None if self.expanded == link_id else link_id
        return self.expanded

    def select(self, href: str) -> str:
        """Follow a link; the menu collapses like it does on mobile."""

        self.close()
        return href

    def visible_children(self) -> List[NavLink]:
        if self.expanded is None:
            return []
        return list(self._by_id[self.expanded].children)


def navigation_tree() -> List[Dict[str, Any]]:
    return [link.to_dict() for link in NAV_LINKS]


__all__ = ["NAV_LINKS", "NavLink", "NavigationMenu", "navigation_tree"]

"""Page navigation state machine.

Exactly one page is current. Navigating produces a ``NavigationView`` that
a frontend applies in one pass: show the current panel, hide the rest, mark
one nav control active and update the title.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Page(Enum):
    OVERVIEW = "overview"
    GENERAL = "general"
    WELCOME = "welcome"
    MODERATION = "moderation"
    TICKETS = "tickets"
    ROLES = "roles"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @property
    def panel_id(self) -> str:
        return f"{self.value}-page"

    @property
    def nav_id(self) -> str:
        return f"nav-{self.value}"

    @classmethod
    def parse(cls, value: Union["Page", str]) -> "Page":
        if isinstance(value, Page):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown page: {value!r}") from None


@dataclass(frozen=True)
class NavigationView:
    current: Page

    @property
    def title(self) -> str:
        return self.current.title

    def is_visible(self, page: Page) -> bool:
        return page is self.current

    def is_active(self, page: Page) -> bool:
        return page is self.current

    @property
    def visible_panels(self) -> list[str]:
        return [page.panel_id for page in Page if self.is_visible(page)]

    @property
    def active_controls(self) -> list[str]:
        return [page.nav_id for page in Page if self.is_active(page)]


class NavigationState:
    """Holds the current page; transitions are driven only by nav events."""

    INITIAL = Page.OVERVIEW

    def __init__(self) -> None:
        self._current = self.INITIAL

    @property
    def current(self) -> Page:
        return self._current

    def view(self) -> NavigationView:
        return NavigationView(self._current)

    def navigate(self, target: Union[Page, str]) -> NavigationView:
        self._current = Page.parse(target)
        return self.view()

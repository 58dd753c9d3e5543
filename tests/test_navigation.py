from __future__ import annotations

import pytest

from core.navigation import NavigationState, Page


def test_initial_page_is_overview() -> None:
    state = NavigationState()

    assert state.current is Page.OVERVIEW
    assert state.view().visible_panels == ["overview-page"]
    assert state.view().title == "Overview"


@pytest.mark.parametrize("page", list(Page))
def test_each_page_shows_exactly_one_panel_and_control(page: Page) -> None:
    view = NavigationState().navigate(page)

    assert view.visible_panels == [page.panel_id]
    assert view.active_controls == [page.nav_id]
    assert view.title == page.value.capitalize()


def test_switching_hides_previous_panel() -> None:
    state = NavigationState()
    state.navigate("general")

    view = state.navigate("tickets")

    assert not view.is_visible(Page.GENERAL)
    assert view.is_visible(Page.TICKETS)
    assert view.visible_panels == ["tickets-page"]
    assert view.title == "Tickets"


def test_navigation_is_reversible() -> None:
    state = NavigationState()
    state.navigate(Page.ROLES)
    state.navigate(Page.OVERVIEW)

    assert state.current is Page.OVERVIEW


def test_unknown_page_is_rejected_and_state_kept() -> None:
    state = NavigationState()
    state.navigate(Page.WELCOME)

    with pytest.raises(ValueError):
        state.navigate("billing")

    assert state.current is Page.WELCOME


def test_page_ids_are_unique() -> None:
    assert len({page.panel_id for page in Page}) == len(Page) == 6
    assert len({page.nav_id for page in Page}) == len(Page)

"""Tests for the interactive gallery controller."""

import pytest

from projectgallery.controller import COLLAPSE_DELAY_MS, ExpansionState, GalleryController
from projectgallery.loader import flatten_document, sort_records


@pytest.fixture
def controller(studio_document):
    return GalleryController(sort_records(flatten_document(studio_document)))


def visible_names(controller):
    return [card.name for card in controller.cards]


def test_initial_render_shows_all_eligible(controller):
    assert visible_names(controller) == ["Lumen Field", "Glass Choir", "Undated One", "Undated Two"]
    assert controller.counter_text == "Showing: 4/4"
    assert controller.dropdown.placeholder_visible


def test_toggle_tag_filters_and_closes_dropdown(controller):
    controller.open_dropdown()
    assert controller.dropdown.is_open
    controller.toggle_tag("Sound")
    assert not controller.dropdown.is_open
    assert visible_names(controller) == ["Lumen Field", "Glass Choir"]
    assert controller.counter_text == "Showing: 2/4"
    assert controller.dropdown.chips == ["Sound"]
    assert not controller.dropdown.placeholder_visible


def test_toggle_same_tag_twice_shows_all(controller):
    controller.toggle_tag("XR")
    controller.toggle_tag("XR")
    assert controller.counter_text == "Showing: 4/4"


def test_remove_tag(controller):
    controller.toggle_tag("XR")
    controller.toggle_tag("Gestures")
    controller.remove_tag("XR")
    assert visible_names(controller) == ["Undated Two"]
    assert controller.remove_tag("Screens") is controller.context


def test_master_sequence_untouched_by_filtering(controller):
    before = controller.records
    controller.toggle_tag("Light")
    controller.toggle_tag("Light")
    assert controller.records == before
    assert visible_names(controller)[0] == "Lumen Field"


def test_dropdown_options_marked_selected(controller):
    controller.toggle_tag("Light")
    options = controller.open_dropdown()
    assert options == ["Materiality", "Light", "Sound", "Gestures", "XR"]
    assert [tag for tag in options if controller.dropdown.is_selected(tag)] == ["Light"]


def test_dropdown_vocabulary_independent_of_filters(controller):
    controller.toggle_tag("XR")
    assert "Sound" in controller.open_dropdown()


def test_click_outside_closes_without_side_effects(controller):
    controller.toggle_tag("Sound")
    controller.toggle_dropdown()
    assert controller.dropdown.is_open
    controller.click_outside()
    assert not controller.dropdown.is_open
    assert controller.filters.selected == ["Sound"]
    assert controller.counter_text == "Showing: 2/4"


def test_toggle_dropdown_twice_closes(controller):
    controller.toggle_dropdown()
    controller.toggle_dropdown()
    assert not controller.dropdown.is_open


def test_at_most_one_card_expanded(controller):
    assert controller.toggle_card(0) == []
    assert controller.toggle_card(1) == [0]
    assert controller.expansion.expanded == 1
    assert controller.expansion.collapsing == {0}


def test_render_resets_expansion(controller):
    controller.toggle_card(2)
    controller.toggle_tag("XR")
    assert controller.expansion.expanded is None


def test_collapse_hides_details_after_timer():
    state = ExpansionState()
    state.toggle(3)
    assert state.details_visible(3)
    assert state.toggle(3) == [3]
    assert state.expanded is None
    assert state.details_visible(3)
    assert state.finish_collapse(3) is True
    assert not state.details_visible(3)


def test_reexpanding_cancels_pending_collapse():
    state = ExpansionState()
    state.toggle(3)
    state.toggle(3)
    state.toggle(3)
    assert state.finish_collapse(3) is False
    assert state.expanded == 3
    assert state.details_visible(3)


def test_collapse_delay_matches_stylesheet_contract():
    assert COLLAPSE_DELAY_MS == 400

from __future__ import annotations

import pytest

from philo_atlas.config.model import AtlasConfig
from philo_atlas.core.dataset_loader import load_sample_dataset
from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.callbacks.callbacks_filters import (
    EVENT_CLEAR_SEARCH,
    EVENT_CLEAR_SELECTION,
    EVENT_ERA,
    EVENT_FOCUS,
    EVENT_REGION,
    EVENT_SEARCH,
    EVENT_SELECT,
    UiEvent,
    apply_ui_event,
    event_from_trigger,
)
from philo_atlas.ui.config import AppConfig
from philo_atlas.ui.ids import IDs, pattern_id


def _make_ctx():
    return AppConfig(config=AtlasConfig(), dataset=load_sample_dataset())


def _apply(state, kind, value=None):
    return apply_ui_event(_make_ctx(), state, UiEvent(kind, value))


# -----------------------------------------------------------------------------
# Trigger translation
# -----------------------------------------------------------------------------
def test_search_input_trigger_keeps_empty_value():
    event = event_from_trigger(IDs.Control.SEARCH_INPUT, "", search_value="")
    assert event == UiEvent(EVENT_SEARCH, "")


def test_pattern_button_triggers():
    assert event_from_trigger(pattern_id(IDs.Pattern.REGION_BTN, "espana"), 1) == UiEvent(EVENT_REGION, "espana")
    assert event_from_trigger(pattern_id(IDs.Pattern.ERA_BTN, "Edad Media"), 2) == UiEvent(EVENT_ERA, "Edad Media")
    assert event_from_trigger(pattern_id(IDs.Pattern.RESULT_ITEM, 2), 1) == UiEvent(EVENT_SELECT, 2)
    assert event_from_trigger(pattern_id(IDs.Pattern.MODAL_FOCUS_BTN, 1), 1) == UiEvent(EVENT_FOCUS, 1)
    assert event_from_trigger(pattern_id(IDs.Pattern.CLEAR_SELECTION_BTN, 1), 1) == UiEvent(EVENT_CLEAR_SELECTION, 1)


def test_freshly_rendered_buttons_are_not_clicks():
    assert event_from_trigger(pattern_id(IDs.Pattern.RESULT_ITEM, 2), 0) is None
    assert event_from_trigger(pattern_id(IDs.Pattern.FOCUS_BTN, 2), None) is None
    assert event_from_trigger(IDs.Control.CLEAR_SEARCH_BTN, 0) is None


def test_map_click_selects_by_customdata():
    click = {"points": [{"customdata": [2], "lat": 40.9, "lon": -4.1}]}
    assert event_from_trigger(IDs.Control.MAP_GRAPH, click, click_data=click) == UiEvent(EVENT_SELECT, 2)
    assert event_from_trigger(IDs.Control.MAP_GRAPH, None, click_data=None) is None


def test_unknown_triggers_are_ignored():
    assert event_from_trigger(None, 1) is None
    assert event_from_trigger("something-else", 1) is None
    assert event_from_trigger({"type": "other", "index": 1}, 1) is None


# -----------------------------------------------------------------------------
# Event application
# -----------------------------------------------------------------------------
def test_region_event_updates_state():
    result = _apply(None, EVENT_REGION, "espana")

    assert result.state["region_filter"] == "espana"
    assert result.viewport is None
    assert result.search_value is None


def test_single_search_match_selects_and_centres():
    result = _apply(FilterState().to_dict(), EVENT_SEARCH, "Averroes")

    assert result.state["search_text"] == "averroes"
    assert result.state["selected_id"] == 1
    assert result.viewport["center"] == [37.8882, -4.7794]
    assert result.viewport["zoom"] == 7


def test_clear_search_resets_input():
    state = FilterState(search_text="nonexistent-zzz").to_dict()

    result = _apply(state, EVENT_CLEAR_SEARCH)

    assert result.state["search_text"] == ""
    assert result.search_value == ""


def test_select_then_region_without_entries_clears_selection():
    selected = _apply(None, EVENT_SELECT, 1)
    assert selected.state["selected_id"] == 1

    result = _apply(selected.state, EVENT_REGION, "francia")

    assert result.state["region_filter"] == "francia"
    assert result.state["selected_id"] is None


def test_select_unknown_or_malformed_id_is_a_no_op():
    state = FilterState(selected_id=2).to_dict()

    assert _apply(state, EVENT_SELECT, 999).state == state
    assert _apply(state, EVENT_SELECT, "abc").state == state


def test_focus_zooms_closer_without_selecting():
    result = _apply(None, EVENT_FOCUS, "2")

    assert result.viewport["zoom"] == 8
    assert result.viewport["entry_id"] == 2
    assert result.state["selected_id"] is None


def test_era_toggle_and_clear_selection():
    state = _apply(None, EVENT_SELECT, 1).state

    state = _apply(state, EVENT_ERA, "Edad Media").state
    assert state["active_era_tags"] == ["Edad Media"]
    assert state["selected_id"] == 1

    state = _apply(state, EVENT_CLEAR_SELECTION).state
    assert state["selected_id"] is None


def test_unknown_event_kind_raises():
    with pytest.raises(ValueError):
        _apply(None, "teleport")

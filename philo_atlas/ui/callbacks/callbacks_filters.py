from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import ALL, Input, Output, State, no_update

from philo_atlas.core.exceptions import NotFoundWarning
from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.callbacks.callbacks_utils import (
    entry_id_from_query,
    first_trigger_value,
    try_parse_filter_state,
)
from philo_atlas.ui.ids import IDs
from philo_atlas.ui.presenter import DashPresenter
from philo_atlas.views.plotly_map import clicked_key

if TYPE_CHECKING:
    from philo_atlas.ui.config import AppConfig

logger = logging.getLogger(__name__)

EVENT_REGION = "region"
EVENT_ERA = "era"
EVENT_SEARCH = "search"
EVENT_CLEAR_SEARCH = "clear_search"
EVENT_SELECT = "select"
EVENT_CLEAR_SELECTION = "clear_selection"
EVENT_FOCUS = "focus"

_PATTERN_EVENTS = {
    IDs.Pattern.REGION_BTN: EVENT_REGION,
    IDs.Pattern.ERA_BTN: EVENT_ERA,
    IDs.Pattern.RESULT_ITEM: EVENT_SELECT,
    IDs.Pattern.CLEAR_SEARCH_INLINE: EVENT_CLEAR_SEARCH,
    IDs.Pattern.FOCUS_BTN: EVENT_FOCUS,
    IDs.Pattern.MODAL_FOCUS_BTN: EVENT_FOCUS,
    IDs.Pattern.CLEAR_SELECTION_BTN: EVENT_CLEAR_SELECTION,
}


@dataclass(frozen=True)
class UiEvent:
    kind: str
    value: Any = None


@dataclass
class EventResult:
    """
    Outcome of one UI event.

    `viewport` and `search_value` are None when the event leaves them alone.
    """
    state: Dict[str, Any]
    viewport: Optional[Dict[str, Any]] = None
    search_value: Optional[str] = None


def event_from_trigger(
    triggered_id: Any,
    triggered_value: Any,
    search_value: Optional[str] = None,
    click_data: Optional[Dict[str, Any]] = None,
) -> Optional[UiEvent]:
    """
    Translate a Dash trigger into a UiEvent.

    Buttons re-created by a render fire with n_clicks 0/None; those are not
    clicks and map to None.
    """
    if triggered_id is None:
        return None

    if triggered_id == IDs.Control.SEARCH_INPUT:
        return UiEvent(EVENT_SEARCH, search_value or "")

    if triggered_id == IDs.Control.CLEAR_SEARCH_BTN:
        return UiEvent(EVENT_CLEAR_SEARCH) if triggered_value else None

    if triggered_id == IDs.Control.MAP_GRAPH:
        key = clicked_key(click_data)
        return UiEvent(EVENT_SELECT, key) if key is not None else None

    if isinstance(triggered_id, dict):
        kind = _PATTERN_EVENTS.get(triggered_id.get("type"))
        if kind is None or not triggered_value:
            return None
        return UiEvent(kind, triggered_id.get("index"))

    return None


def apply_ui_event(ctx: AppConfig, state_data: Optional[Dict[str, Any]], event: UiEvent) -> EventResult:
    """
    Run one event through a fresh Atlas built from the stored FilterState.

    Pure with respect to Dash: no callback context is needed, which keeps the
    whole interaction flow testable.
    """
    state = try_parse_filter_state(state_data) or FilterState()
    presenter = DashPresenter(ctx.config.regions)
    atlas, _ = ctx.build_atlas(state, presenter=presenter)
    search_value: Optional[str] = None

    # Unknown ids are already logged by the core; a stale click is not an error
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NotFoundWarning)

        if event.kind == EVENT_REGION:
            atlas.set_region(event.value)
        elif event.kind == EVENT_ERA:
            atlas.toggle_era_tag(event.value)
        elif event.kind == EVENT_SEARCH:
            atlas.set_search_text(event.value)
        elif event.kind == EVENT_CLEAR_SEARCH:
            atlas.clear_search()
            search_value = ""
        elif event.kind == EVENT_SELECT:
            atlas.select(_as_entry_id(event.value))
        elif event.kind == EVENT_CLEAR_SELECTION:
            atlas.clear_selection()
        elif event.kind == EVENT_FOCUS:
            atlas.focus_on(_as_entry_id(event.value))
        else:
            raise ValueError(f"Unknown UI event kind: {event.kind!r}")

    logger.debug(
        "ui_event",
        extra={"kind": event.kind, "effects": presenter.effects, "visible": len(atlas.visible)},
    )
    return EventResult(state=atlas.state.to_dict(), viewport=presenter.viewport, search_value=search_value)


def _as_entry_id(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _or_no_update(value):
    return no_update if value is None else value


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # All user interactions -> FilterState (+ viewport)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Store.MAP_VIEWPORT, "data"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Input({"type": IDs.Pattern.REGION_BTN, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.ERA_BTN, "index": ALL}, "n_clicks"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.CLEAR_SEARCH_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.CLEAR_SEARCH_INLINE, "index": ALL}, "n_clicks"),
        Input(IDs.Control.MAP_GRAPH, "clickData"),
        Input({"type": IDs.Pattern.RESULT_ITEM, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.FOCUS_BTN, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.MODAL_FOCUS_BTN, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.CLEAR_SELECTION_BTN, "index": ALL}, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def handle_ui_event(
        _region_clicks,
        _era_clicks,
        search_value,
        _clear_clicks,
        _inline_clear_clicks,
        click_data,
        _result_clicks,
        _focus_clicks,
        _modal_focus_clicks,
        _clear_selection_clicks,
        fs_data,
    ):
        event = event_from_trigger(
            dash.ctx.triggered_id,
            first_trigger_value(dash.ctx.triggered),
            search_value=search_value,
            click_data=click_data,
        )
        if event is None:
            return no_update, no_update, no_update

        result = apply_ui_event(ctx, fs_data, event)
        return result.state, _or_no_update(result.viewport), _or_no_update(result.search_value)

    # ---------------------------------------------------------
    # Deep link: ?philosopher=<id> selects on load
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Output(IDs.Store.MAP_VIEWPORT, "data", allow_duplicate=True),
        Input(IDs.Control.URL, "search"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call="initial_duplicate",
    )
    def select_from_url(search, fs_data):
        entry_id = entry_id_from_query(search)
        if entry_id is None:
            return no_update, no_update

        result = apply_ui_event(ctx, fs_data, UiEvent(EVENT_SELECT, entry_id))
        return result.state, _or_no_update(result.viewport)

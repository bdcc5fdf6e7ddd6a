from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import ALL, Input, Output, State, no_update

from philo_atlas.ui.callbacks.callbacks_utils import first_trigger_value
from philo_atlas.ui.components import detail_modal_body, methodology_body
from philo_atlas.ui.ids import IDs

if TYPE_CHECKING:
    from philo_atlas.ui.config import AppConfig

logger = logging.getLogger(__name__)

METHODOLOGY_TITLE = "Metodología y Fuentes"


def modal_content(ctx: AppConfig, triggered_id: Any, href: Optional[str] = None) -> Tuple[bool, Any, Any]:
    """
    (is_open, title, body) for a modal trigger. Close and focus buttons shut it.
    """
    if triggered_id == IDs.Control.DATA_SOURCE_LINK:
        return True, METHODOLOGY_TITLE, methodology_body(ctx.config)

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.VIEW_DETAILS_BTN:
        entry = ctx.dataset.find_by_id(triggered_id.get("index"))
        if entry is None:
            logger.warning("Detail view requested for unknown entry", extra={"entry_id": triggered_id.get("index")})
            return False, no_update, no_update
        return True, entry.name, detail_modal_body(entry, ctx.config.regions, href or "")

    return False, no_update, no_update


def register_modal_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.MODAL_TITLE, "children"),
        Output(IDs.Control.MODAL_BODY, "children"),
        Input({"type": IDs.Pattern.VIEW_DETAILS_BTN, "index": ALL}, "n_clicks"),
        Input(IDs.Control.DATA_SOURCE_LINK, "n_clicks"),
        Input(IDs.Control.MODAL_CLOSE_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.MODAL_FOCUS_BTN, "index": ALL}, "n_clicks"),
        State(IDs.Control.URL, "href"),
        prevent_initial_call=True,
    )
    def toggle_modal(_detail_clicks, _source_clicks, _close_clicks, _focus_clicks, href):
        if not first_trigger_value(dash.ctx.triggered):
            return no_update, no_update, no_update
        return modal_content(ctx, dash.ctx.triggered_id, href)

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import dash
import plotly.graph_objects as go
from dash import ALL, Input, Output, State

from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.callbacks.callbacks_utils import try_parse_filter_state
from philo_atlas.ui.components import era_button_class, error_panel, region_button_class
from philo_atlas.ui.ids import IDs
from philo_atlas.ui.presenter import DashPresenter

if TYPE_CHECKING:
    from philo_atlas.ui.config import AppConfig

logger = logging.getLogger(__name__)

EMPTY_MAP_TITLE = "Sin resultados"


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Algo salió mal al dibujar el mapa.", details)


def render_outputs(
    ctx: AppConfig,
    fs_data: Optional[Dict[str, Any]],
    viewport: Optional[Dict[str, Any]] = None,
) -> Tuple[go.Figure, Any, str]:
    """
    FilterState (+ last centring request) -> (map figure, detail panel, visible count).
    """
    state = try_parse_filter_state(fs_data) or FilterState()
    presenter = DashPresenter(ctx.config.regions)
    atlas, widget = ctx.build_atlas(state, presenter=presenter, with_map=True)

    revision = None
    if viewport and viewport.get("center"):
        widget.pan_zoom_to(tuple(viewport["center"]), viewport.get("zoom", ctx.config.map.zoom))
        revision = viewport.get("rev")

    title = EMPTY_MAP_TITLE if not len(atlas.visible) else None
    figure = widget.to_figure(key_for=atlas.markers.entry_id_for, title=title, revision=revision)
    panel = presenter.replay(atlas.get_selected_entry(), atlas.visible)
    return figure, panel, str(len(atlas.visible))


def region_classes(button_ids: List[Dict[str, Any]], fs_data: Optional[Dict[str, Any]]) -> List[str]:
    state = try_parse_filter_state(fs_data) or FilterState()
    return [region_button_class(b["index"], state.region_filter) for b in button_ids]


def era_classes(button_ids: List[Dict[str, Any]], fs_data: Optional[Dict[str, Any]]) -> List[str]:
    state = try_parse_filter_state(fs_data) or FilterState()
    return [era_button_class(b["index"], state.active_era_tags) for b in button_ids]


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Map, detail panel and counter: FilterState -> outputs
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAP_GRAPH, "figure"),
        Output(IDs.Control.DETAIL_PANEL, "children"),
        Output(IDs.Control.VISIBLE_COUNT, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.MAP_VIEWPORT, "data"),
    )
    def update_atlas_from_state(fs_data, viewport):
        try:
            return render_outputs(ctx, fs_data, viewport)
        except Exception:
            logger.exception("Error in update_atlas_from_state", extra={"filter_state": fs_data})
            return (
                _error_figure("Si el problema persiste, revisa los registros del servidor."),
                error_panel("No se pudo actualizar el panel de detalles."),
                dash.no_update,
            )

    # ---------------------------------------------------------
    # Active button styling
    # ---------------------------------------------------------
    @app.callback(
        Output({"type": IDs.Pattern.REGION_BTN, "index": ALL}, "className"),
        Input(IDs.Store.FILTER_STATE, "data"),
        State({"type": IDs.Pattern.REGION_BTN, "index": ALL}, "id"),
    )
    def update_region_button_classes(fs_data, button_ids):
        return region_classes(button_ids, fs_data)

    @app.callback(
        Output({"type": IDs.Pattern.ERA_BTN, "index": ALL}, "className"),
        Input(IDs.Store.FILTER_STATE, "data"),
        State({"type": IDs.Pattern.ERA_BTN, "index": ALL}, "id"),
    )
    def update_era_button_classes(fs_data, button_ids):
        return era_classes(button_ids, fs_data)

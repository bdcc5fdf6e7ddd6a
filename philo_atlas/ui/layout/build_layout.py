from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.components import format_date
from philo_atlas.ui.ids import IDs
from philo_atlas.ui.layout.build_detail_panel import build_detail_panel, build_modal
from philo_atlas.ui.layout.build_filter_panel import build_filter_panel
from philo_atlas.ui.layout.build_map_panel import build_map_panel
from philo_atlas.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from philo_atlas.ui.config import AppConfig


def _fallback_banner(ctx: AppConfig) -> dbc.Alert:
    return dbc.Alert(
        "No se pudo cargar la base de datos configurada; se muestran datos de ejemplo.",
        id=IDs.Control.FALLBACK_BANNER,
        color="warning",
        is_open=ctx.used_fallback,
        dismissable=True,
        className="mt-2 mb-0",
    )


def _footer() -> html.Footer:
    return html.Footer(
        [
            html.Span("Última actualización: "),
            html.Span(format_date(), id=IDs.Control.CURRENT_DATE),
            html.Span(" · "),
            html.A("Metodología y fuentes", id=IDs.Control.DATA_SOURCE_LINK, href="#", n_clicks=0),
        ],
        className="atlas-footer text-muted mt-3 mb-3",
    )


def build_layout(ctx: AppConfig):
    state = FilterState()
    atlas, _ = ctx.build_atlas(state)
    counts = atlas.get_region_counts()
    regions = ctx.config.regions

    return dbc.Container(
        fluid=True,
        className="atlas-root",
        children=[
            build_navbar(ctx.config, atlas.get_stats()),
            _fallback_banner(ctx),

            # App-level stores; nothing survives a reload
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="memory", data=state.to_dict()),
            dcc.Store(id=IDs.Store.MAP_VIEWPORT, storage_type="memory"),
            dcc.Location(id=IDs.Control.URL, refresh=False),

            dbc.Row(
                [
                    dbc.Col(
                        build_filter_panel(counts, atlas.get_era_tags(), regions, state),
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        build_map_panel(ctx.config.map, len(atlas.visible)),
                        md=6,
                        className="mt-3",
                    ),
                    dbc.Col(
                        build_detail_panel(counts, regions),
                        md=3,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
            _footer(),
            build_modal(),
        ],
    )

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from philo_atlas.config.model import MapConfig
from philo_atlas.ui.ids import IDs


def build_map_panel(map_config: MapConfig, visible_count: int) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Mapa"),
                        html.Span(
                            [
                                html.Span(str(visible_count), id=IDs.Control.VISIBLE_COUNT),
                                " filósofos visibles",
                            ],
                            className="ms-auto text-muted",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Loading(
                    id="map-loading",
                    type="default",
                    children=dcc.Graph(
                        id=IDs.Control.MAP_GRAPH,
                        style={"height": f"{map_config.height}px"},
                        config={"responsive": True, "scrollZoom": True},
                    ),
                ),
                className="atlas-map-body",
            ),
        ],
        className="atlas-maincard",
    )

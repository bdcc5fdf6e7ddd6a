from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from philo_atlas.config.model import AtlasConfig
from philo_atlas.core.atlas import AtlasStats
from philo_atlas.ui.components import format_century_range
from philo_atlas.ui.ids import IDs


def _stat(label: str, value: str, stat_id: str) -> html.Div:
    return html.Div(
        [
            html.Span(value, id=stat_id, className="stat-number"),
            html.Span(label, className="stat-label"),
        ],
        className="stat-item",
    )


def build_navbar(config: AtlasConfig, stats: AtlasStats) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H1(config.ui_title, className="mb-0"),
                        html.Small(config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        _stat("Filósofos", str(stats.total), IDs.Control.TOTAL_COUNT),
                        _stat("Regiones", str(stats.regions), IDs.Control.REGION_COUNT),
                        _stat("Siglos", format_century_range(stats.century_range), IDs.Control.CENTURY_RANGE),
                    ],
                    className="ms-auto d-flex stats-block",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm atlas-navbar",
    )

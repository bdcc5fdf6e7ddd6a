from __future__ import annotations

from typing import Dict, Iterable

import dash_bootstrap_components as dbc
from dash import dcc, html

from philo_atlas.config.model import RegionStyles
from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.components import era_buttons, region_buttons
from philo_atlas.ui.ids import IDs


def build_filter_panel(
    counts: Dict[str, int],
    era_tags: Iterable[str],
    regions: RegionStyles,
    state: FilterState,
) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Explorar", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Buscar", className="form-label"),
                    dbc.InputGroup(
                        [
                            dcc.Input(
                                id=IDs.Control.SEARCH_INPUT,
                                type="text",
                                value=state.search_text,
                                placeholder="Nombre, concepto, obra, ciudad...",
                                debounce=False,
                                className="form-control",
                            ),
                            dbc.Button(
                                "✕",
                                id=IDs.Control.CLEAR_SEARCH_BTN,
                                color="secondary",
                                outline=True,
                                title="Limpiar búsqueda",
                                n_clicks=0,
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Label("Región", className="form-label"),
                    html.Div(
                        region_buttons(counts, regions, state.region_filter),
                        id=IDs.Control.REGION_FILTER,
                        className="region-filters mb-3",
                    ),
                    html.Label("Época", className="form-label"),
                    html.Div(
                        era_buttons(era_tags, state.active_era_tags),
                        id=IDs.Control.ERA_FILTER,
                        className="era-filters",
                    ),
                ]
            ),
        ],
        className="atlas-sidebar",
    )

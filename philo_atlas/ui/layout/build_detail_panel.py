from __future__ import annotations

from typing import Dict

import dash_bootstrap_components as dbc
from dash import html

from philo_atlas.config.model import RegionStyles
from philo_atlas.ui.components import intro_panel, legend
from philo_atlas.ui.ids import IDs


def build_detail_panel(counts: Dict[str, int], regions: RegionStyles) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardBody(
                html.Div(intro_panel(), id=IDs.Control.DETAIL_PANEL, className="philosopher-details"),
            ),
            dbc.CardFooter(
                [
                    html.H4("Leyenda", className="legend-title"),
                    html.Div(legend(counts, regions), id=IDs.Control.LEGEND, className="legend"),
                ]
            ),
        ],
        className="atlas-detail-card",
    )


def build_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.MODAL_TITLE)),
            dbc.ModalBody(id=IDs.Control.MODAL_BODY),
            dbc.ModalFooter(
                dbc.Button("Cerrar", id=IDs.Control.MODAL_CLOSE_BTN, color="secondary", n_clicks=0),
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="lg",
        scrollable=True,
    )

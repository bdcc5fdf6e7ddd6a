"""
Dash component builders for the atlas side panels and modal.

Everything here is presentation only: builders take entries/config and return
components, they never touch the filter state.
"""
from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

import dash_bootstrap_components as dbc
from dash import dcc, html

from philo_atlas.config.model import AtlasConfig, RegionStyles
from philo_atlas.core.entry import Entry
from philo_atlas.core.filter_engine import EmptyResultSet, VisibleSet
from philo_atlas.core.filter_state import ALL_REGIONS
from philo_atlas.ui.ids import IDs, pattern_id

NOT_SPECIFIED_ERA = "Época no especificada"
NOT_SPECIFIED_CATEGORY = "Categoría no especificada"
NOT_SPECIFIED_PLACE = "Ubicación no especificada"

DEFAULT_METHODOLOGY: List[Tuple[str, List[str]]] = [
    (
        "Criterios de Selección",
        [
            "Rigor académico: información verificada por consenso académico",
            "Producción escrita: haber escrito al menos una obra filosófica significativa",
            "Influencia documentada: contribuciones reconocidas en historias especializadas",
            "Contextualización histórica: ubicación en región cultural/política histórica",
        ],
    ),
    (
        "Criterios Geográficos",
        [
            "Se utiliza la región cultural o política histórica, no el concepto moderno de \"nación\"",
            "Al-Ándalus para pensadores islámicos en la península ibérica medieval",
            "Estados Italianos para el Renacimiento italiano",
            "Imperio Habsburgo para Europa Central pre-nacional",
        ],
    ),
    (
        "Fuentes Principales",
        [
            "Stanford Encyclopedia of Philosophy",
            "Routledge Encyclopedia of Philosophy",
            "Historias especializadas por período y región",
            "Bibliografías académicas verificadas",
        ],
    ),
    (
        "Limitaciones",
        [
            "Cobertura inicial centrada en Europa Occidental",
            "Proceso de verificación manual de cada entrada",
            "Representación limitada de filósofas (en proceso de expansión)",
        ],
    ),
]


# -----------------------------------------------------------------------------
# Small helpers
# -----------------------------------------------------------------------------
def format_century_range(century_range: Optional[Tuple[int, int]]) -> str:
    if century_range is None:
        return "N/A"
    low, high = century_range
    return f"{low} - {high}"


def format_date(today: Optional[date] = None) -> str:
    """dd/mm/yyyy, the display locale of the atlas."""
    today = today or date.today()
    return today.strftime("%d/%m/%Y")


def share_text(entry: Entry, base_url: str) -> str:
    base_url = base_url.split("?", 1)[0]
    return (
        f"Conoce a {entry.name} en el Atlas Filosófico Europeo: {entry.area or ''}. "
        f"{base_url}?philosopher={entry.id}"
    )


def entry_color(entry: Entry, regions: RegionStyles) -> str:
    return entry.color or regions.color_for(entry.region)


def _works_list(entry: Entry) -> html.Ul:
    items = entry.works or ("Obras no especificadas",)
    return html.Ul([html.Li(w) for w in items], className="works-list")


def _section(title: str, body) -> html.Div:
    return html.Div(
        [html.H3(title, className="info-title"), body],
        className="info-section",
    )


# -----------------------------------------------------------------------------
# Filter controls
# -----------------------------------------------------------------------------
def region_button_class(region: str, active_region: str) -> str:
    return "region-btn active" if region == active_region else "region-btn"


def era_button_class(tag: str, active_tags: Iterable[str]) -> str:
    return "era-btn active" if tag in set(active_tags) else "era-btn"


def region_buttons(counts: Dict[str, int], regions: RegionStyles, active_region: str = ALL_REGIONS) -> List[html.Button]:
    """'Todos' first, then every region present in the data, sorted by tag."""
    buttons = [
        html.Button(
            [html.Span("Todos"), html.Span(str(counts.get(ALL_REGIONS, 0)), className="btn-counter")],
            id=pattern_id(IDs.Pattern.REGION_BTN, ALL_REGIONS),
            className=region_button_class(ALL_REGIONS, active_region),
            n_clicks=0,
        )
    ]
    for region in sorted(r for r in counts if r != ALL_REGIONS):
        if counts[region] <= 0:
            continue
        buttons.append(
            html.Button(
                [html.Span(regions.name_for(region)), html.Span(str(counts[region]), className="btn-counter")],
                id=pattern_id(IDs.Pattern.REGION_BTN, region),
                className=region_button_class(region, active_region),
                n_clicks=0,
            )
        )
    return buttons


def era_buttons(era_tags: Iterable[str], active_tags: Iterable[str] = ()) -> List[html.Button]:
    active = list(active_tags)
    return [
        html.Button(
            tag,
            id=pattern_id(IDs.Pattern.ERA_BTN, tag),
            title=f"Filtrar por: {tag}",
            className=era_button_class(tag, active),
            n_clicks=0,
        )
        for tag in sorted(era_tags)
    ]


def legend(counts: Dict[str, int], regions: RegionStyles) -> List[html.Div]:
    return [
        html.Div(
            [
                html.Span(className="legend-color", style={"backgroundColor": regions.color_for(region)}),
                html.Span(f"{regions.name_for(region)} ({counts[region]})", className="legend-text"),
            ],
            className="legend-item",
        )
        for region in sorted(r for r in counts if r != ALL_REGIONS)
        if counts[region] > 0
    ]


# -----------------------------------------------------------------------------
# Detail panel contents
# -----------------------------------------------------------------------------
def intro_panel() -> html.Div:
    return html.Div(
        [
            html.H2("Bienvenido al Atlas Filosófico"),
            html.P(
                "Este mapa interactivo presenta una selección rigurosa de filósofos europeos "
                "más allá de las figuras canónicas más difundidas. Cada marcador representa "
                "un pensador con contribuciones documentadas y verificadas.",
                className="intro-text",
            ),
            html.Div(
                [
                    html.H4("Cómo usar:"),
                    html.Ul(
                        [
                            html.Li("Haz clic en cualquier marcador del mapa para ver detalles"),
                            html.Li("Filtra por región o época usando los botones"),
                            html.Li("Busca términos específicos en la barra de búsqueda"),
                            html.Li("Haz clic en el título de cualquier filósofo para centrar el mapa"),
                        ]
                    ),
                ],
                className="instructions",
            ),
            html.Div(
                [
                    html.H4("Nota metodológica:"),
                    html.P(
                        "Se utiliza la región cultural o política histórica (no el concepto "
                        "moderno de \"nación\") para una ubicación precisa."
                    ),
                ],
                className="methodology-note",
            ),
        ],
        className="intro-panel",
    )


def detail_card(entry: Entry, regions: RegionStyles) -> html.Div:
    color = regions.color_for(entry.region)
    return html.Div(
        [
            html.Div(
                [
                    html.H2(
                        entry.name,
                        id=pattern_id(IDs.Pattern.FOCUS_BTN, entry.id),
                        className="philosopher-name",
                        title="Centrar en mapa",
                        n_clicks=0,
                    ),
                    html.P(entry.era_range or NOT_SPECIFIED_ERA, className="philosopher-era"),
                    html.Span(entry.era_tag or NOT_SPECIFIED_CATEGORY, className="philosopher-subcategory"),
                    html.Span(
                        regions.name_for(entry.region),
                        className="region-badge",
                        style={"backgroundColor": color},
                    ),
                ],
                className="philosopher-header",
            ),
            _section("Área de la filosofía", html.P(entry.area or "No especificada")),
            _section("Conceptos centrales", html.P(entry.concepts or "No especificados")),
            _section("Obras principales", _works_list(entry)),
            _section("Ubicación histórica", html.P(entry.city or NOT_SPECIFIED_PLACE)),
            html.Div(
                [
                    dbc.Button(
                        "Ver vista detallada completa",
                        id=pattern_id(IDs.Pattern.VIEW_DETAILS_BTN, entry.id),
                        className="view-full-btn me-2",
                        color="secondary",
                        size="sm",
                        n_clicks=0,
                    ),
                    dbc.Button(
                        "Cerrar",
                        id=pattern_id(IDs.Pattern.CLEAR_SELECTION_BTN, entry.id),
                        className="clear-selection-btn",
                        color="link",
                        size="sm",
                        n_clicks=0,
                    ),
                ],
                className="info-section",
            ),
        ],
        className="philosopher-card",
    )


def _clear_search_button() -> dbc.Button:
    return dbc.Button(
        "Limpiar búsqueda",
        id=pattern_id(IDs.Pattern.CLEAR_SEARCH_INLINE, "panel"),
        className="clear-search-btn",
        color="link",
        n_clicks=0,
    )


def no_results_panel(visible: EmptyResultSet) -> html.Div:
    if visible.caused_by_search:
        children = [
            html.H3("No se encontraron resultados"),
            html.P(["No hay filósofos que coincidan con \"", html.Strong(visible.search_text), "\""]),
            html.P("Intenta con otros términos o verifica la ortografía."),
            _clear_search_button(),
        ]
    else:
        children = [
            html.H3("No se encontraron resultados"),
            html.P("Ningún filósofo coincide con los filtros de región y época seleccionados."),
        ]
    return html.Div(children, className="no-results")


def results_list(visible: VisibleSet, regions: RegionStyles) -> html.Div:
    items = [
        html.Div(
            [
                html.Div(className="result-color", style={"backgroundColor": regions.color_for(e.region)}),
                html.Div(
                    [
                        html.H4(e.name),
                        html.P(f"{e.era_range or ''} • {e.area or ''}"),
                    ],
                    className="result-info",
                ),
            ],
            id=pattern_id(IDs.Pattern.RESULT_ITEM, e.id),
            className="result-item",
            n_clicks=0,
        )
        for e in visible
    ]
    return html.Div(
        [
            html.H3("Resultados de búsqueda"),
            html.P(
                [
                    "Se encontraron ",
                    html.Strong(str(len(visible))),
                    " filósofos para \"",
                    html.Strong(visible.search_text),
                    "\"",
                ]
            ),
            html.Div(items, className="results-list"),
            _clear_search_button(),
        ],
        className="search-results",
    )


def error_panel(message: str) -> html.Div:
    return html.Div(
        [html.H3("Error"), html.P(message)],
        className="error-panel",
    )


# -----------------------------------------------------------------------------
# Modal bodies
# -----------------------------------------------------------------------------
def detail_modal_body(entry: Entry, regions: RegionStyles, base_url: str = "") -> html.Div:
    color = regions.color_for(entry.region)
    return html.Div(
        [
            html.Div(
                [
                    html.P(entry.era_range or NOT_SPECIFIED_ERA, className="philosopher-era-modal"),
                    dbc.Badge(regions.name_for(entry.region), style={"backgroundColor": color}, className="me-1"),
                    dbc.Badge(entry.era_tag or NOT_SPECIFIED_CATEGORY, color="light", text_color="dark"),
                    html.P(entry.city or NOT_SPECIFIED_PLACE, className="location"),
                ],
                className="philosopher-header-modal",
                style={"borderLeft": f"6px solid {color}"},
            ),
            _section("Área de la filosofía", html.P(entry.area or "No especificada")),
            _section("Conceptos centrales", html.P(entry.concepts or "No especificados")),
            _section("Obras principales", _works_list(entry)),
            _section(
                "Contexto histórico",
                html.P(f"{entry.era_tag or 'Contexto no especificado'}. {entry.city or ''}".strip()),
            ),
            _section(
                "Influencia y legado",
                html.P("Información de influencia y recepción histórica (en desarrollo para todos los filósofos)."),
            ),
            html.Div(
                [
                    dbc.Button(
                        "Centrar en mapa",
                        id=pattern_id(IDs.Pattern.MODAL_FOCUS_BTN, entry.id),
                        className="action-btn me-2",
                        color="primary",
                        n_clicks=0,
                    ),
                    html.Span("Compartir ", className="ms-2"),
                    dcc.Clipboard(
                        content=share_text(entry, base_url),
                        title="Copiar enlace",
                        style={"display": "inline-block", "cursor": "pointer"},
                    ),
                ],
                className="modal-actions",
            ),
        ]
    )


def methodology_body(config: AtlasConfig) -> html.Div:
    if config.methodology:
        return html.Div([html.P(p) for p in config.methodology])

    sections = []
    for title, bullets in DEFAULT_METHODOLOGY:
        sections.append(html.H3(title))
        sections.append(html.Ul([html.Li(b) for b in bullets]))
    sections.append(
        html.P(
            "Actualizaciones: la base de datos se actualiza periódicamente con nuevas verificaciones.",
            className="text-muted",
        )
    )
    return html.Div(sections)

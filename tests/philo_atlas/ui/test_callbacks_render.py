from __future__ import annotations

from philo_atlas.config.model import AtlasConfig
from philo_atlas.core.dataset_loader import load_sample_dataset
from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.callbacks.callbacks_modal import METHODOLOGY_TITLE, modal_content
from philo_atlas.ui.callbacks.callbacks_render import (
    _error_figure,
    era_classes,
    region_classes,
    render_outputs,
)
from philo_atlas.ui.callbacks.callbacks_utils import entry_id_from_query, try_parse_filter_state
from philo_atlas.ui.config import AppConfig
from philo_atlas.ui.ids import IDs, pattern_id


def _make_ctx():
    return AppConfig(config=AtlasConfig(), dataset=load_sample_dataset())


def test_render_default_state():
    figure, panel, count = render_outputs(_make_ctx(), None)

    assert count == "2"
    assert panel.className == "intro-panel"
    markers = figure.data[-1]
    assert sorted(c[0] for c in markers.customdata) == [1, 2]


def test_render_selected_entry_is_highlighted_and_centred():
    state = FilterState(selected_id=2).to_dict()
    viewport = {"center": [40.9429, -4.1088], "zoom": 7, "rev": "r1"}

    figure, panel, count = render_outputs(_make_ctx(), state, viewport)

    assert panel.className == "philosopher-card"
    assert len(figure.data) == 2  # highlight halo + markers
    assert figure.layout.map.zoom == 7
    assert figure.layout.map.center.lat == 40.9429
    assert figure.layout.uirevision == "r1"


def test_render_no_results():
    state = FilterState(search_text="nonexistent-zzz").to_dict()

    figure, panel, count = render_outputs(_make_ctx(), state)

    assert count == "0"
    assert panel.className == "no-results"
    assert figure.layout.title.text == "Sin resultados"


def test_render_repairs_hidden_selection():
    state = FilterState(region_filter="francia", selected_id=1).to_dict()

    _, panel, count = render_outputs(_make_ctx(), state)

    assert count == "0"
    assert panel.className == "no-results"


def test_button_classes_follow_state():
    state = FilterState(region_filter="espana", active_era_tags=["Edad Media"]).to_dict()
    region_ids = [pattern_id(IDs.Pattern.REGION_BTN, "all"), pattern_id(IDs.Pattern.REGION_BTN, "espana")]
    era_ids = [pattern_id(IDs.Pattern.ERA_BTN, "Edad Media"), pattern_id(IDs.Pattern.ERA_BTN, "Siglo XVI")]

    assert region_classes(region_ids, state) == ["region-btn", "region-btn active"]
    assert era_classes(era_ids, state) == ["era-btn active", "era-btn"]
    assert region_classes(region_ids, None) == ["region-btn active", "region-btn"]


def test_error_figure_has_message():
    fig = _error_figure("detalles")
    assert "detalles" in fig.layout.annotations[0].text


def test_modal_content():
    ctx = _make_ctx()

    is_open, title, _ = modal_content(ctx, pattern_id(IDs.Pattern.VIEW_DETAILS_BTN, 2), "http://x/")
    assert is_open and title == "Domingo de Soto"

    is_open, title, _ = modal_content(ctx, IDs.Control.DATA_SOURCE_LINK)
    assert is_open and title == METHODOLOGY_TITLE

    is_open, _, _ = modal_content(ctx, IDs.Control.MODAL_CLOSE_BTN)
    assert is_open is False

    is_open, _, _ = modal_content(ctx, pattern_id(IDs.Pattern.MODAL_FOCUS_BTN, 2))
    assert is_open is False


def test_entry_id_from_query():
    assert entry_id_from_query("?philosopher=2") == 2
    assert entry_id_from_query("?foo=1&philosopher=7") == 7
    assert entry_id_from_query("?philosopher=abc") is None
    assert entry_id_from_query("") is None
    assert entry_id_from_query(None) is None


def test_try_parse_filter_state():
    assert try_parse_filter_state(None) is None
    assert try_parse_filter_state({}) is None
    assert try_parse_filter_state({"selected_id": "x"}) is None
    assert try_parse_filter_state({"region_filter": "espana"}).region_filter == "espana"

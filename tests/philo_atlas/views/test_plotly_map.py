from __future__ import annotations

from philo_atlas.config.model import MapConfig
from philo_atlas.core.map_widget import StyleHint
from philo_atlas.views.plotly_map import HIGHLIGHT_COLOR, PlotlyMapWidget, clicked_key


def _make_widget():
    widget = PlotlyMapWidget(MapConfig(min_zoom=3, max_zoom=10))
    h1 = widget.add_point((37.88, -4.78), StyleHint(color="#3498db", label="1", tooltip="Averroes\n1126 - 1198"))
    h2 = widget.add_point((40.94, -4.11), StyleHint(color="#2ecc71", label="2", tooltip="Soto", highlighted=True))
    return widget, h1, h2


def test_add_and_remove_points():
    widget, h1, h2 = _make_widget()

    assert h1 != h2
    assert widget.is_point_visible(h1)
    widget.remove_point(h1)
    assert not widget.is_point_visible(h1)
    assert len(widget) == 1

    # removing twice is harmless
    widget.remove_point(h1)


def test_pan_zoom_clamps_to_limits():
    widget, _, _ = _make_widget()

    widget.pan_zoom_to((41.0, 2.0), 15)
    assert widget.center == (41.0, 2.0)
    assert widget.zoom == 10

    widget.pan_zoom_to((41.0, 2.0), 1)
    assert widget.zoom == 3


def test_to_frame_uses_key_function():
    widget, h1, h2 = _make_widget()
    keys = {h1: 1, h2: 2}

    frame = widget.to_frame(keys.get)

    assert list(frame["key"]) == [1, 2]
    assert frame.loc[0, "tooltip"] == "Averroes<br>1126 - 1198"
    assert list(frame["highlighted"]) == [False, True]


def test_to_figure_draws_highlight_under_markers():
    widget, h1, h2 = _make_widget()
    keys = {h1: 1, h2: 2}

    fig = widget.to_figure(keys.get, revision="abc")

    assert len(fig.data) == 2
    halo, markers = fig.data
    assert halo.marker.color == HIGHLIGHT_COLOR
    assert list(halo.lat) == [40.94]
    assert [c[0] for c in markers.customdata] == [1, 2]
    assert fig.layout.uirevision == "abc"
    assert fig.layout.map.zoom == 4


def test_empty_widget_still_renders_a_map():
    fig = PlotlyMapWidget().to_figure()

    assert len(fig.data) == 1
    assert fig.layout.map.style == "carto-positron"


def test_clicked_key():
    assert clicked_key(None) is None
    assert clicked_key({"points": []}) is None
    assert clicked_key({"points": [{"customdata": [5]}]}) == 5
    assert clicked_key({"points": [{"customdata": 6}]}) == 6

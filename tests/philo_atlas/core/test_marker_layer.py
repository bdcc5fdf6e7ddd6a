from __future__ import annotations

from itertools import count

from philo_atlas.core.entry import Entry
from philo_atlas.core.map_widget import MapWidget, MarkerLayer, default_style


class _FakeWidget(MapWidget):
    def __init__(self):
        self.points = {}
        self.log = []
        self._ids = count(100)

    def add_point(self, coordinate, style_hint):
        handle = next(self._ids)
        self.points[handle] = (coordinate, style_hint)
        self.log.append(("add", handle))
        return handle

    def remove_point(self, handle):
        self.points.pop(handle, None)
        self.log.append(("remove", handle))

    def pan_zoom_to(self, coordinate, zoom):
        self.log.append(("pan", coordinate, zoom))

    def is_point_visible(self, handle):
        return handle in self.points


def _entries():
    return [
        Entry(id=1, region="espana", coordinate=(40.0, -3.0), name="Uno", era_range="1126 - 1198"),
        Entry(id=2, region="espana", coordinate=(40.0, -3.0), name="Dos"),  # same place
        Entry(id=3, region="italia", coordinate=(41.9, 12.5), name="Tres", color="#e74c3c"),
    ]


def test_sync_adds_and_removes_by_entry_id():
    widget = _FakeWidget()
    layer = MarkerLayer(widget)
    entries = _entries()

    layer.sync(entries)
    assert len(layer) == 3
    assert len(widget.points) == 3

    layer.sync(entries[2:])
    assert layer.entry_ids == [3]
    assert len(widget.points) == 1
    assert layer.handle_for(1) is None


def test_entries_sharing_a_coordinate_get_distinct_handles():
    layer = MarkerLayer(_FakeWidget())
    layer.sync(_entries())

    h1, h2 = layer.handle_for(1), layer.handle_for(2)
    assert h1 != h2
    assert layer.entry_id_for(h1) == 1
    assert layer.entry_id_for(h2) == 2


def test_sync_is_incremental():
    widget = _FakeWidget()
    layer = MarkerLayer(widget)
    layer.sync(_entries())
    widget.log.clear()

    layer.sync(_entries())

    assert widget.log == []


def test_highlight_restyles_previous_and_new_marker():
    widget = _FakeWidget()
    layer = MarkerLayer(widget)
    layer.sync(_entries())

    layer.highlight(1)
    _, style = widget.points[layer.handle_for(1)]
    assert style.highlighted
    assert layer.highlighted_id == 1

    layer.highlight(3)
    assert not widget.points[layer.handle_for(1)][1].highlighted
    assert widget.points[layer.handle_for(3)][1].highlighted

    layer.highlight(None)
    assert not any(style.highlighted for _, style in widget.points.values())


def test_default_style():
    e1, _, e3 = _entries()

    assert default_style(e1).tooltip == "Uno\n1126 - 1198"
    assert default_style(e1).label == "1"
    assert default_style(e3).color == "#e74c3c"

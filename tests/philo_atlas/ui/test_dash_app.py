from __future__ import annotations

import json

from dash import Dash

from philo_atlas.core.sample_data import sample_payload
from philo_atlas.ui.dash_app import create_dash_app


def _make_config_root(tmp_path, data_source):
    root = tmp_path / "config"
    root.mkdir()
    (root / "global.json").write_text(
        json.dumps({"ui_title": "Atlas de prueba", "data_source": data_source}),
        encoding="utf-8",
    )
    return root


def test_create_dash_app_with_local_dataset(tmp_path, monkeypatch):
    monkeypatch.delenv("PHILO_ATLAS_DATA_SOURCE", raising=False)
    (tmp_path / "filosofos.json").write_text(json.dumps(sample_payload()), encoding="utf-8")
    root = _make_config_root(tmp_path, "../filosofos.json")

    app = create_dash_app(root)

    assert isinstance(app, Dash)
    assert app.title == "Atlas de prueba"
    assert callable(app.layout)
    assert app.layout() is not None
    assert len(app.callback_map) >= 5


def test_create_dash_app_falls_back_to_sample(tmp_path, monkeypatch):
    monkeypatch.delenv("PHILO_ATLAS_DATA_SOURCE", raising=False)
    root = _make_config_root(tmp_path, "missing.json")

    app = create_dash_app(root)

    banner = _find_by_id(app.layout(), "fallback-banner")
    assert banner is not None
    assert banner.is_open is True


def test_layout_date_is_computed_per_page_load(tmp_path, monkeypatch):
    monkeypatch.delenv("PHILO_ATLAS_DATA_SOURCE", raising=False)
    app = create_dash_app(_make_config_root(tmp_path, "missing.json"))

    monkeypatch.setattr("philo_atlas.ui.layout.build_layout.format_date", lambda: "1 de enero de 2030")

    footer_date = _find_by_id(app.layout(), "current-date")
    assert footer_date.children == "1 de enero de 2030"


def _find_by_id(component, target):
    if getattr(component, "id", None) == target:
        return component
    children = getattr(component, "children", None)
    if children is None or isinstance(children, str):
        return None
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        found = _find_by_id(child, target)
        if found is not None:
            return found
    return None

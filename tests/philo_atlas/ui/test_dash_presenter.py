from __future__ import annotations

from philo_atlas.config.model import RegionStyles
from philo_atlas.core.dataset_loader import load_sample_dataset
from philo_atlas.core.filter_engine import compute_visible
from philo_atlas.core.filter_state import FilterState
from philo_atlas.ui.presenter import DashPresenter


def _make_presenter():
    return DashPresenter(RegionStyles()), load_sample_dataset()


def test_starts_on_intro_without_viewport():
    presenter, _ = _make_presenter()

    assert presenter.viewport is None
    assert presenter.panel.className == "intro-panel"
    assert presenter.effects == []


def test_center_on_records_viewport():
    presenter, ds = _make_presenter()
    entry = ds.find_by_id(1)

    presenter.center_on(entry, 7)
    first_rev = presenter.viewport["rev"]
    presenter.center_on(entry, 7)

    assert presenter.viewport["center"] == [entry.lat, entry.lng]
    assert presenter.viewport["zoom"] == 7
    assert presenter.viewport["entry_id"] == 1
    assert presenter.viewport["rev"] != first_rev


def test_show_detail_and_results_panels():
    presenter, ds = _make_presenter()

    presenter.show_detail(ds.find_by_id(2))
    assert presenter.panel.className == "philosopher-card"

    presenter.show_results(compute_visible(ds, FilterState(search_text="españa")))
    assert presenter.panel.className == "search-results"

    presenter.show_results(compute_visible(ds, FilterState(search_text="nonexistent-zzz")))
    assert presenter.panel.className == "no-results"

    assert presenter.effects == ["detail", "results", "no_results"]


def test_replay_derives_panel_from_state():
    presenter, ds = _make_presenter()
    browse = compute_visible(ds, FilterState())
    several = compute_visible(ds, FilterState(search_text="españa"))

    assert presenter.replay(ds.find_by_id(1), browse).className == "philosopher-card"
    assert presenter.replay(None, several).className == "search-results"
    assert presenter.replay(None, browse).className == "intro-panel"

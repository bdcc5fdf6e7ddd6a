from __future__ import annotations

from philo_atlas.core.dataset_loader import load_sample_dataset
from philo_atlas.core.filter_engine import (
    EmptyResultSet,
    FilterEngine,
    SearchOutcome,
    compute_visible,
)
from philo_atlas.core.filter_state import FilterState


def _make_engine(**state):
    return FilterEngine(load_sample_dataset(), FilterState(**state))


def test_all_region_shows_every_entry():
    engine = _make_engine()
    visible = engine.compute_visible()

    assert visible.ids == (1, 2)
    assert visible.outcome is SearchOutcome.BROWSE


def test_region_filter():
    engine = _make_engine()

    assert engine.set_region("espana") is True
    assert len(engine.compute_visible()) == 2


def test_known_region_without_entries_shows_nothing():
    engine = _make_engine()

    assert engine.set_region("francia") is True
    assert len(engine.compute_visible()) == 0


def test_unknown_region_is_ignored():
    engine = _make_engine(region_filter="espana")

    assert engine.set_region("atlantida") is False
    assert engine.state.region_filter == "espana"


def test_none_region_means_all():
    engine = _make_engine(region_filter="espana")
    engine.set_region(None)
    assert engine.state.region_filter == "all"


def test_era_toggle_round_trip_restores_state():
    engine = _make_engine()
    before = engine.compute_visible()

    engine.toggle_era_tag("Siglo XVI")
    filtered = engine.compute_visible()
    engine.toggle_era_tag("Siglo XVI")

    assert filtered.ids == (2,)
    assert engine.state.active_era_tags == []
    assert engine.compute_visible() == before


def test_active_era_tags_are_ored():
    engine = _make_engine()
    engine.toggle_era_tag("Siglo XVI")
    engine.toggle_era_tag("Edad Media")

    assert engine.compute_visible().ids == (1, 2)


def test_blank_era_tag_is_ignored():
    engine = _make_engine()
    assert engine.toggle_era_tag("  ") == []
    assert engine.toggle_era_tag(None) == []


def test_search_single_match():
    engine = _make_engine()
    engine.set_search_text("  Averroes ")

    visible = engine.compute_visible()

    assert engine.state.search_text == "averroes"
    assert visible.ids == (1,)
    assert visible.outcome is SearchOutcome.SINGLE_MATCH


def test_search_without_matches_returns_empty_result_set():
    engine = _make_engine()
    engine.set_search_text("nonexistent-zzz")

    visible = engine.compute_visible()

    assert isinstance(visible, EmptyResultSet)
    assert len(visible) == 0
    assert visible.caused_by_search
    assert visible.outcome is SearchOutcome.NO_RESULTS


def test_empty_result_from_filters_is_not_caused_by_search():
    visible = compute_visible(
        load_sample_dataset(),
        FilterState(active_era_tags=["Ilustración"]),
    )
    assert isinstance(visible, EmptyResultSet)
    assert not visible.caused_by_search


def test_compute_visible_is_pure():
    ds = load_sample_dataset()
    state = FilterState(region_filter="espana", search_text="soto")
    snapshot = state.to_dict()

    first = compute_visible(ds, state)
    second = compute_visible(ds, state)

    assert first == second
    assert state.to_dict() == snapshot


def test_multiple_matches_outcome():
    engine = _make_engine()
    engine.set_search_text("espa")  # region name of both entries
    assert engine.compute_visible().outcome is SearchOutcome.MULTIPLE_MATCHES


def test_custom_region_vocabulary():
    engine = FilterEngine(load_sample_dataset(), known_regions={"atlantida"})

    assert engine.set_region("atlantida") is True
    assert engine.set_region("espana") is True  # present in the data
    assert engine.set_region("francia") is False


def test_region_era_and_search_combine():
    state = FilterState(region_filter="espana", active_era_tags=["Siglo XVI"], search_text="soto")

    visible = compute_visible(load_sample_dataset(), state)

    assert visible.ids == (2,)
    assert state.region_filter == "espana"


def test_region_filter_combined_with_era_without_matches():
    engine = _make_engine()
    engine.set_region("espana")
    engine.toggle_era_tag("Ilustración")

    assert isinstance(engine.compute_visible(), EmptyResultSet)

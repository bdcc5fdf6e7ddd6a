from __future__ import annotations

import numpy as np
import pytest

from philo_atlas.core.dataset import Dataset
from philo_atlas.core.entry import Entry


def _entry(entry_id, region, era_tag=None, era_range=None, coordinate=None, name=None):
    return Entry(
        id=entry_id,
        region=region,
        coordinate=coordinate or (40.0 + entry_id, -3.0 + entry_id),
        name=name or f"Filósofo {entry_id}",
        era_tag=era_tag,
        era_range=era_range,
    )


def _make_dataset():
    return Dataset(
        [
            _entry(1, "espana", "Edad Media", "1126 - 1198"),
            _entry(2, "espana", "Escolástica Renacentista (Siglo XVI)", "1494 - 1560"),
            _entry(3, "italia", "Renacimiento (Siglos XV-XVI)", "1568 - 1639"),
            _entry(4, "francia", None, None),
        ],
        name="test",
    )


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        Dataset([_entry(1, "espana"), _entry(1, "italia")])


def test_find_by_id_and_coordinate():
    ds = _make_dataset()

    assert ds.find_by_id(3).region == "italia"
    assert ds.find_by_id(99) is None
    assert ds.find_by_id(None) is None
    assert ds.find_by_coordinate(41.0, -2.0).id == 1
    assert ds.find_by_coordinate(0.0, 0.0) is None


def test_valid_sets_and_unique_values():
    ds = _make_dataset()

    assert ds.unique_regions() == {"espana", "italia", "francia"}
    assert "Edad Media" in ds.unique_era_tags()
    assert "" not in ds.unique_era_tags()
    assert ds.valid_sets() is ds.valid_sets()


def test_region_counts_include_total():
    counts = _make_dataset().region_counts()

    assert counts["espana"] == 2
    assert counts["italia"] == 1
    assert counts["all"] == 4


def test_group_by_region_keeps_dataset_order():
    groups = _make_dataset().group_by_region()
    assert [e.id for e in groups["espana"]] == [1, 2]


def test_century_range_ignores_entries_without_years():
    assert _make_dataset().century_range() == (12, 17)


def test_masks_and_take():
    ds = _make_dataset()

    assert ds.region_mask("all").all()
    assert ds.region_mask("espana").tolist() == [True, True, False, False]
    assert ds.era_mask(["Siglo"]).tolist() == [False, True, True, False]
    assert ds.search_mask("filósofo 3").tolist() == [False, False, True, False]

    mask = np.array([False, True, True, False])
    assert [e.id for e in ds.take(mask)] == [2, 3]


def test_frame_has_one_row_per_entry():
    ds = _make_dataset()
    assert len(ds.frame) == len(ds) == 4
    assert list(ds.frame["id"]) == [1, 2, 3, 4]


def test_region_mask_is_a_writable_copy():
    ds = _make_dataset()

    mask = ds.region_mask("espana")
    assert mask.flags.writeable
    mask &= ds.era_mask(["Siglo"])

    assert mask.tolist() == [False, True, False, False]
    assert ds.region_mask("espana").tolist() == [True, True, False, False]


def test_era_mask_follows_entry_predicate():
    ds = _make_dataset()
    tags = ["Edad Media", "Siglos XV"]
    assert ds.era_mask(tags).tolist() == [e.matches_era(tags) for e in ds.entries]

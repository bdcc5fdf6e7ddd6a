from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from philo_atlas.core.entry import Entry
from philo_atlas.core.filter_state import ALL_REGIONS

_FRAME_COLUMNS = ["id", "region", "lat", "lng", "name", "era_tag", "era_range", "city", "color"]


@dataclass(frozen=True)
class ValidSets:
    """
    Cached valid values for UI validation / sanitisation.
    Computed once per Dataset since the entries never change.
    """
    regions: frozenset
    era_tags: frozenset


class Dataset:
    """
    Immutable store of the loaded entries.

    Includes:
    - lookup by id (and by exact coordinate, for legacy callers)
    - groupings by region and era tag
    - vectorised predicate masks used by the FilterEngine

    Entry order is the order of the source payload and is preserved by every
    query that returns entries.
    """

    def __init__(
        self,
        entries: Sequence[Entry],
        name: str = "filosofos",
        source: Optional[str] = None,
    ) -> None:
        self.name = name
        self.source = source
        self._entries: Tuple[Entry, ...] = tuple(entries)

        self._by_id: Dict[int, Entry] = {e.id: e for e in self._entries}
        if len(self._by_id) != len(self._entries):
            raise ValueError("Dataset entries must have unique ids")

        self._frame = pd.DataFrame.from_records(
            [e.to_record() for e in self._entries],
            columns=_FRAME_COLUMNS,
        )

        # Pre-normalised columns for the predicate masks
        self._region_series: pd.Series = self._frame["region"].astype(str)
        self._era_series: pd.Series = self._frame["era_tag"].fillna("").astype(str)

        self._valid_sets: Optional[ValidSets] = None

    # -------------------------------------------------------------------------
    # Basic access
    # -------------------------------------------------------------------------
    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def find_by_id(self, entry_id: Optional[int]) -> Optional[Entry]:
        if entry_id is None:
            return None
        return self._by_id.get(entry_id)

    def find_by_coordinate(self, lat: float, lng: float) -> Optional[Entry]:
        """Exact-equality lookup; only meaningful while coordinates are unique."""
        for entry in self._entries:
            if entry.coordinate[0] == lat and entry.coordinate[1] == lng:
                return entry
        return None

    # -------------------------------------------------------------------------
    # Cached valid values
    # -------------------------------------------------------------------------
    def valid_sets(self) -> ValidSets:
        if self._valid_sets is not None:
            return self._valid_sets

        era_tags = {t for t in self._era_series.unique() if t}
        self._valid_sets = ValidSets(
            regions=frozenset(self._region_series.unique()),
            era_tags=frozenset(era_tags),
        )
        return self._valid_sets

    def unique_regions(self) -> set[str]:
        return set(self.valid_sets().regions)

    def unique_era_tags(self) -> set[str]:
        return set(self.valid_sets().era_tags)

    # -------------------------------------------------------------------------
    # Groupings / stats
    # -------------------------------------------------------------------------
    def group_by_region(self) -> Dict[str, List[Entry]]:
        groups: Dict[str, List[Entry]] = {}
        for entry in self._entries:
            groups.setdefault(entry.region, []).append(entry)
        return groups

    def region_counts(self) -> Dict[str, int]:
        """Entries per region, plus the total under the "all" key."""
        counts = {str(k): int(v) for k, v in self._region_series.value_counts(sort=False).items()}
        counts[ALL_REGIONS] = len(self._entries)
        return counts

    def century_range(self) -> Optional[Tuple[int, int]]:
        centuries = [c for c in (e.century for e in self._entries) if c is not None]
        if not centuries:
            return None
        return min(centuries), max(centuries)

    # -------------------------------------------------------------------------
    # Predicate masks
    # -------------------------------------------------------------------------
    def region_mask(self, region: str) -> np.ndarray:
        if region == ALL_REGIONS:
            return np.ones(len(self._entries), dtype=bool)
        return (self._region_series == region).to_numpy(dtype=bool, copy=True)

    def era_mask(self, active_tags: Iterable[str]) -> np.ndarray:
        tags = [t for t in active_tags if t]
        if not tags:
            return np.ones(len(self._entries), dtype=bool)
        return np.fromiter(
            (e.matches_era(tags) for e in self._entries),
            dtype=bool,
            count=len(self._entries),
        )

    def search_mask(self, term: str) -> np.ndarray:
        if not term:
            return np.ones(len(self._entries), dtype=bool)
        return np.fromiter(
            (e.matches_search(term) for e in self._entries),
            dtype=bool,
            count=len(self._entries),
        )

    def take(self, mask: np.ndarray) -> List[Entry]:
        """Return the entries where mask is True, in dataset order."""
        return [e for e, keep in zip(self._entries, mask) if keep]

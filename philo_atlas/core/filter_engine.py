from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from philo_atlas.core.dataset import Dataset
from philo_atlas.core.entry import Entry
from philo_atlas.core.filter_state import ALL_REGIONS, KNOWN_REGIONS, FilterState, normalise_search

logger = logging.getLogger(__name__)


class SearchOutcome(str, Enum):
    BROWSE = "browse"                    # no search text, at least one entry visible
    SINGLE_MATCH = "single_match"        # search active, exactly one entry visible
    MULTIPLE_MATCHES = "multiple_matches"
    NO_RESULTS = "no_results"


@dataclass(frozen=True)
class VisibleSet:
    """
    Ordered result of applying the current filters to the dataset.

    Entries keep dataset order. `search_text` is the normalised search the set
    was computed with, so the presentation layer can word its messages.
    """

    entries: Tuple[Entry, ...]
    search_text: str = ""

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self.ids

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(e.id for e in self.entries)

    @property
    def outcome(self) -> SearchOutcome:
        if not self.entries:
            return SearchOutcome.NO_RESULTS
        if not self.search_text:
            return SearchOutcome.BROWSE
        if len(self.entries) == 1:
            return SearchOutcome.SINGLE_MATCH
        return SearchOutcome.MULTIPLE_MATCHES


class EmptyResultSet(VisibleSet):
    """
    Nothing matches the current filters.

    A normal outcome, not an error: the UI shows a "no results" message
    instead of a blank map.
    """

    @property
    def caused_by_search(self) -> bool:
        return bool(self.search_text)


def compute_visible(dataset: Dataset, state: FilterState) -> VisibleSet:
    """
    Pure function of (dataset, state).

    region AND era AND search, with OR between active era tags. Era tags match
    by substring, so a short tag selects every entry whose longer era label
    embeds it.
    """
    mask = (
        dataset.region_mask(state.region_filter)
        & dataset.era_mask(state.active_era_tags)
        & dataset.search_mask(state.search_text)
    )

    entries = tuple(dataset.take(mask))
    if not entries:
        return EmptyResultSet(entries=(), search_text=state.search_text)
    return VisibleSet(entries=entries, search_text=state.search_text)


class FilterEngine:
    """
    Mutates a FilterState in response to user actions and computes the visible set.

    The engine never touches the selection; keeping the selection consistent
    with visibility is the SelectionBridge's job.

    Accepted regions are the known vocabulary plus every region present in the
    dataset. A known region without entries is valid and simply shows nothing.
    """

    def __init__(
        self,
        dataset: Dataset,
        state: Optional[FilterState] = None,
        known_regions: Optional[Iterable[str]] = None,
    ) -> None:
        self.dataset = dataset
        self.state = state if state is not None else FilterState()
        vocabulary = KNOWN_REGIONS if known_regions is None else frozenset(known_regions)
        self.known_regions = frozenset(vocabulary | dataset.valid_sets().regions)

    def is_known_region(self, region: Optional[str]) -> bool:
        return region == ALL_REGIONS or region in self.known_regions

    def set_region(self, region: Optional[str]) -> bool:
        """
        Set the region filter. Returns False (and leaves the state alone) for
        tags outside the region vocabulary.
        """
        region = region or ALL_REGIONS
        if not self.is_known_region(region):
            logger.warning("Ignoring unknown region filter", extra={"region": region})
            return False
        self.state.region_filter = region
        return True

    def toggle_era_tag(self, tag: Optional[str]) -> List[str]:
        if tag is None or not str(tag).strip():
            return list(self.state.active_era_tags)
        tag = str(tag)
        if tag in self.state.active_era_tags:
            self.state.active_era_tags.remove(tag)
        else:
            self.state.active_era_tags.append(tag)
        return list(self.state.active_era_tags)

    def set_search_text(self, text: Optional[str]) -> str:
        self.state.search_text = normalise_search(text)
        return self.state.search_text

    def compute_visible(self) -> VisibleSet:
        return compute_visible(self.dataset, self.state)

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from philo_atlas.core.dataset import Dataset
from philo_atlas.core.entry import Entry
from philo_atlas.core.exceptions import NotFoundWarning
from philo_atlas.core.filter_engine import FilterEngine, SearchOutcome, VisibleSet
from philo_atlas.core.filter_state import ALL_REGIONS, FilterState
from philo_atlas.core.map_widget import MapWidget, MarkerLayer, StyleFactory, default_style
from philo_atlas.core.selection import SELECT_ZOOM, Presenter, SelectionBridge, SelectionStatus

logger = logging.getLogger(__name__)

FOCUS_ZOOM = 8


@dataclass(frozen=True)
class AtlasStats:
    total: int
    visible: int
    regions: int
    century_range: Optional[Tuple[int, int]]


class Atlas:
    """
    Controller tying the dataset, the filter engine, the selection bridge and
    the map markers together.

    Every mutating handler runs the same pipeline before returning:
    mutate state -> compute visible set -> sync markers -> drop a selection
    that became hidden -> auto-select a single search match.
    """

    def __init__(
        self,
        dataset: Dataset,
        state: Optional[FilterState] = None,
        presenter: Optional[Presenter] = None,
        map_widget: Optional[MapWidget] = None,
        style_for: StyleFactory = default_style,
        select_zoom: int = SELECT_ZOOM,
        focus_zoom: int = FOCUS_ZOOM,
        known_regions: Optional[Iterable[str]] = None,
    ) -> None:
        self.dataset = dataset
        self.engine = FilterEngine(dataset, state, known_regions=known_regions)
        self.state = self.engine.state
        self.bridge = SelectionBridge(dataset, self.state, presenter, select_zoom=select_zoom)
        self.markers = MarkerLayer(map_widget, style_for) if map_widget is not None else None
        self.focus_zoom = focus_zoom

        self._sanitise_state()
        self._visible: VisibleSet = self._recompute(auto_select=False)

    # -------------------------------------------------------------------------
    # Internal pipeline
    # -------------------------------------------------------------------------
    def _sanitise_state(self) -> None:
        """Repair a restored state that points at unknown regions or ids."""
        region = self.state.region_filter
        if not self.engine.is_known_region(region):
            logger.warning("Restored region filter is unknown; resetting", extra={"region": region})
            self.state.region_filter = ALL_REGIONS

        selected = self.state.selected_id
        if selected is not None and self.dataset.find_by_id(selected) is None:
            logger.warning("Restored selection is unknown; clearing", extra={"entry_id": selected})
            self.state.selected_id = None

    def _recompute(self, auto_select: bool = True) -> VisibleSet:
        visible = self.engine.compute_visible()

        if self.markers is not None:
            self.markers.sync(visible)

        self.bridge.on_visibility_changed(visible)

        if auto_select and visible.outcome is SearchOutcome.SINGLE_MATCH:
            match = visible.entries[0]
            if self.state.selected_id != match.id:
                self.bridge.select(match.id)
        elif visible.outcome in (SearchOutcome.MULTIPLE_MATCHES, SearchOutcome.NO_RESULTS):
            if self.state.selected_id is None:
                self.bridge.presenter.show_results(visible)

        self._highlight_selection()
        self._visible = visible
        return visible

    def _highlight_selection(self) -> None:
        if self.markers is not None:
            self.markers.highlight(self.state.selected_id)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------
    def set_region(self, region: Optional[str]) -> VisibleSet:
        self.engine.set_region(region)
        return self._recompute()

    def toggle_era_tag(self, tag: Optional[str]) -> VisibleSet:
        self.engine.toggle_era_tag(tag)
        return self._recompute()

    def set_search_text(self, text: Optional[str]) -> VisibleSet:
        self.engine.set_search_text(text)
        return self._recompute()

    def clear_search(self) -> VisibleSet:
        return self.set_search_text("")

    def select(self, entry_id: Optional[int]) -> VisibleSet:
        """
        Select an entry. The selection only survives if the entry is visible
        under the current filters.
        """
        if self.bridge.select(entry_id):
            return self._recompute(auto_select=False)
        return self._visible

    def clear_selection(self) -> VisibleSet:
        self.bridge.clear_selection()
        self._highlight_selection()
        return self._visible

    def focus_on(self, entry_id: Optional[int]) -> bool:
        """Zoom closer on an entry without changing the selection."""
        entry = self.dataset.find_by_id(entry_id)
        if entry is None:
            message = f"Entry {entry_id!r} not found; cannot focus"
            logger.warning(message, extra={"entry_id": entry_id})
            warnings.warn(message, NotFoundWarning, stacklevel=2)
            return False
        self.bridge.presenter.center_on(entry, self.focus_zoom)
        return True

    # -------------------------------------------------------------------------
    # Presentation queries
    # -------------------------------------------------------------------------
    @property
    def visible(self) -> VisibleSet:
        return self._visible

    @property
    def selection_status(self) -> SelectionStatus:
        return self.bridge.status

    def get_visible_entries(self) -> List[Entry]:
        return list(self._visible.entries)

    def get_selected_entry(self) -> Optional[Entry]:
        return self.bridge.selected_entry

    def get_region_counts(self) -> Dict[str, int]:
        return self.dataset.region_counts()

    def get_era_tags(self) -> List[str]:
        return sorted(self.dataset.unique_era_tags())

    def get_stats(self) -> AtlasStats:
        return AtlasStats(
            total=len(self.dataset),
            visible=len(self._visible),
            regions=len(self.dataset.unique_regions()),
            century_range=self.dataset.century_range(),
        )

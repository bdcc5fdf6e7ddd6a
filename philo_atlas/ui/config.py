from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from philo_atlas.config.model import AtlasConfig
from philo_atlas.core.atlas import Atlas
from philo_atlas.core.dataset import Dataset
from philo_atlas.core.entry import Entry
from philo_atlas.core.filter_state import FilterState
from philo_atlas.core.map_widget import StyleHint, default_style
from philo_atlas.core.selection import Presenter
from philo_atlas.ui.components import entry_color
from philo_atlas.views.plotly_map import PlotlyMapWidget


@dataclass
class AppConfig:
    """
    Shared, read-only state of the Dash app: the loaded config and dataset.

    Passed into layout + callback registration instead of module-level
    globals. Per-user state lives in the filter-state store, not here.
    """
    config: AtlasConfig
    dataset: Dataset
    used_fallback: bool = False

    def style_for(self, entry: Entry) -> StyleHint:
        base = default_style(entry)
        return StyleHint(
            color=entry_color(entry, self.config.regions),
            label=base.label,
            tooltip=base.tooltip,
        )

    def build_atlas(
        self,
        state: Optional[FilterState] = None,
        presenter: Optional[Presenter] = None,
        with_map: bool = False,
    ) -> Tuple[Atlas, Optional[PlotlyMapWidget]]:
        """
        Rebuild the controller for one callback from a restored FilterState.
        """
        widget = PlotlyMapWidget(self.config.map) if with_map else None
        atlas = Atlas(
            self.dataset,
            state=state,
            presenter=presenter,
            map_widget=widget,
            style_for=self.style_for,
            select_zoom=self.config.map.select_zoom,
            focus_zoom=self.config.map.focus_zoom,
            known_regions=self.config.regions.tags,
        )
        return atlas, widget

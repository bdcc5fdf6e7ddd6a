from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from philo_atlas.config.model import RegionStyles
from philo_atlas.core.entry import Entry
from philo_atlas.core.filter_engine import EmptyResultSet, SearchOutcome, VisibleSet
from philo_atlas.core.selection import Presenter
from philo_atlas.ui import components


class DashPresenter(Presenter):
    """
    Records the effects requested by the core as Dash-ready values.

    - `viewport`: last centring request, stored in the map-viewport store
    - `panel`: children for the detail panel
    - `effects`: names of the calls in order, handy for logging and tests
    """

    def __init__(self, regions: RegionStyles) -> None:
        self.regions = regions
        self.viewport: Optional[Dict[str, Any]] = None
        self.panel: Any = components.intro_panel()
        self.effects: List[str] = []

    def center_on(self, entry: Entry, zoom: int) -> None:
        # "rev" forces a re-centre even when the same entry is focused twice
        self.viewport = {
            "center": [entry.lat, entry.lng],
            "zoom": int(zoom),
            "entry_id": entry.id,
            "rev": uuid.uuid4().hex,
        }
        self.effects.append("center")

    def show_detail(self, entry: Entry) -> None:
        self.panel = components.detail_card(entry, self.regions)
        self.effects.append("detail")

    def show_intro(self) -> None:
        self.panel = components.intro_panel()
        self.effects.append("intro")

    def show_results(self, visible: VisibleSet) -> None:
        if isinstance(visible, EmptyResultSet):
            self.panel = components.no_results_panel(visible)
            self.effects.append("no_results")
        else:
            self.panel = components.results_list(visible, self.regions)
            self.effects.append("results")

    def replay(self, selected: Optional[Entry], visible: VisibleSet) -> Any:
        """
        Rebuild the panel from state alone (used by the render callback,
        where no user action is being handled).
        """
        if selected is not None:
            self.show_detail(selected)
        elif visible.outcome in (SearchOutcome.MULTIPLE_MATCHES, SearchOutcome.NO_RESULTS):
            self.show_results(visible)
        else:
            self.show_intro()
        return self.panel

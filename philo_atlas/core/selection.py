from __future__ import annotations

import logging
import warnings
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from philo_atlas.core.dataset import Dataset
from philo_atlas.core.entry import Entry
from philo_atlas.core.exceptions import NotFoundWarning
from philo_atlas.core.filter_engine import VisibleSet
from philo_atlas.core.filter_state import FilterState

logger = logging.getLogger(__name__)

SELECT_ZOOM = 7


class SelectionStatus(str, Enum):
    NO_SELECTION = "no_selection"
    SELECTED = "selected"


class Presenter(ABC):
    """
    Rendering collaborator driven by the SelectionBridge and the Atlas.

    Implementations decide what "centre", "detail" and "intro" look like
    (Dash components, a test recorder, ...). Every call is synchronous.
    """

    @abstractmethod
    def center_on(self, entry: Entry, zoom: int) -> None:
        raise NotImplementedError()

    @abstractmethod
    def show_detail(self, entry: Entry) -> None:
        raise NotImplementedError()

    @abstractmethod
    def show_intro(self) -> None:
        raise NotImplementedError()

    def show_results(self, visible: VisibleSet) -> None:
        """Search result list / no-results message. Optional for presenters."""
        return None


class NullPresenter(Presenter):
    def center_on(self, entry: Entry, zoom: int) -> None:
        return None

    def show_detail(self, entry: Entry) -> None:
        return None

    def show_intro(self) -> None:
        return None


class SelectionBridge:
    """
    Tracks the single selected entry and keeps it consistent with visibility.

    States: NO_SELECTION <-> SELECTED(id). The selected entry is always a member
    of the last visible set reported through `on_visibility_changed`, or there
    is no selection.
    """

    def __init__(
        self,
        dataset: Dataset,
        state: FilterState,
        presenter: Optional[Presenter] = None,
        select_zoom: int = SELECT_ZOOM,
    ) -> None:
        self.dataset = dataset
        self.state = state
        self.presenter = presenter if presenter is not None else NullPresenter()
        self.select_zoom = select_zoom

    @property
    def status(self) -> SelectionStatus:
        if self.state.selected_id is None:
            return SelectionStatus.NO_SELECTION
        return SelectionStatus.SELECTED

    @property
    def selected_entry(self) -> Optional[Entry]:
        return self.dataset.find_by_id(self.state.selected_id)

    def select(self, entry_id: Optional[int]) -> bool:
        """
        Select an entry by id, centre the map on it, then render its detail.

        Unknown ids issue a NotFoundWarning and leave the selection unchanged.
        """
        entry = self.dataset.find_by_id(entry_id)
        if entry is None:
            message = f"Entry {entry_id!r} not found; selection unchanged"
            logger.warning(message, extra={"entry_id": entry_id})
            warnings.warn(message, NotFoundWarning, stacklevel=2)
            return False

        self.state.selected_id = entry.id
        logger.info("Entry selected", extra={"entry_id": entry.id, "entry_name": entry.name})

        self.presenter.center_on(entry, self.select_zoom)
        self.presenter.show_detail(entry)
        return True

    def clear_selection(self) -> None:
        self.state.selected_id = None
        self.presenter.show_intro()

    def on_visibility_changed(self, visible: VisibleSet) -> bool:
        """
        Drop the selection when its entry is no longer visible.

        Returns True when a forced clear happened.
        """
        selected = self.state.selected_id
        if selected is None or selected in visible:
            return False

        logger.info("Selected entry hidden by filters; clearing selection", extra={"entry_id": selected})
        self.clear_selection()
        return True

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Dict, Hashable, Iterable, Optional

from philo_atlas.core.entry import Coordinate, Entry

Handle = Hashable

DEFAULT_MARKER_COLOR = "#3498db"


@dataclass(frozen=True)
class StyleHint:
    color: str = DEFAULT_MARKER_COLOR
    label: str = ""
    tooltip: str = ""
    highlighted: bool = False


class MapWidget(ABC):
    """
    Capability surface of the map the atlas draws on.

    The core only ever adds/removes points and moves the viewport; projection,
    tiles and drawing belong to the concrete widget.
    """

    @abstractmethod
    def add_point(self, coordinate: Coordinate, style_hint: StyleHint) -> Handle:
        raise NotImplementedError()

    @abstractmethod
    def remove_point(self, handle: Handle) -> None:
        raise NotImplementedError()

    @abstractmethod
    def pan_zoom_to(self, coordinate: Coordinate, zoom: int) -> None:
        raise NotImplementedError()

    @abstractmethod
    def is_point_visible(self, handle: Handle) -> bool:
        raise NotImplementedError()


StyleFactory = Callable[[Entry], StyleHint]


def default_style(entry: Entry) -> StyleHint:
    tooltip = entry.name if not entry.era_range else f"{entry.name}\n{entry.era_range}"
    return StyleHint(
        color=entry.color or DEFAULT_MARKER_COLOR,
        label=str(entry.id),
        tooltip=tooltip,
    )


class MarkerLayer:
    """
    Association table between entry ids and map handles.

    Markers are looked up by entry id, never by coordinate, so two entries at
    the same place stay distinguishable.
    """

    def __init__(self, widget: MapWidget, style_for: StyleFactory = default_style) -> None:
        self.widget = widget
        self.style_for = style_for
        self._handles: Dict[int, Handle] = {}
        self._entries: Dict[int, Entry] = {}
        self._ids_by_handle: Dict[Handle, int] = {}
        self._highlighted: Optional[int] = None

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    @property
    def entry_ids(self) -> list[int]:
        return list(self._handles)

    @property
    def highlighted_id(self) -> Optional[int]:
        return self._highlighted

    def handle_for(self, entry_id: int) -> Optional[Handle]:
        return self._handles.get(entry_id)

    def entry_id_for(self, handle: Handle) -> Optional[int]:
        return self._ids_by_handle.get(handle)

    def _style(self, entry: Entry) -> StyleHint:
        style = self.style_for(entry)
        if entry.id == self._highlighted:
            style = replace(style, highlighted=True)
        return style

    def _add(self, entry: Entry) -> None:
        handle = self.widget.add_point(entry.coordinate, self._style(entry))
        self._handles[entry.id] = handle
        self._entries[entry.id] = entry
        self._ids_by_handle[handle] = entry.id

    def _remove(self, entry_id: int) -> None:
        handle = self._handles.pop(entry_id)
        self._entries.pop(entry_id, None)
        self._ids_by_handle.pop(handle, None)
        self.widget.remove_point(handle)

    def sync(self, visible: Iterable[Entry]) -> None:
        """Add markers for newly visible entries and remove the hidden ones."""
        visible = list(visible)
        keep = {e.id for e in visible}

        for entry_id in [i for i in self._handles if i not in keep]:
            self._remove(entry_id)

        for entry in visible:
            if entry.id not in self._handles:
                self._add(entry)

    def highlight(self, entry_id: Optional[int]) -> None:
        """
        Highlight one marker (or none). Affected markers are re-added so the
        widget picks up the new style.
        """
        previous = self._highlighted
        self._highlighted = entry_id
        if previous == entry_id:
            return

        for affected in (previous, entry_id):
            entry = self._entries.get(affected) if affected is not None else None
            if entry is None:
                continue
            self._remove(entry.id)
            self._add(entry)

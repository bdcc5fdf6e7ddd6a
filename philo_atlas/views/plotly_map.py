from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from philo_atlas.config.model import MapConfig
from philo_atlas.core.entry import Coordinate
from philo_atlas.core.map_widget import Handle, MapWidget, StyleHint

HIGHLIGHT_COLOR = "#ffeb3b"
MARKER_SIZE = 14
HIGHLIGHT_SIZE = 26

KeyFn = Callable[[Handle], Optional[Any]]

_FRAME_COLUMNS = ["handle", "key", "lat", "lng", "color", "label", "tooltip", "highlighted"]


@dataclass(frozen=True)
class _Point:
    coordinate: Coordinate
    style: StyleHint


class PlotlyMapWidget(MapWidget):
    """
    In-memory map widget rendered as a plotly Scattermap figure.

    Points are kept in insertion order; re-added (highlighted) points end up
    last so they are drawn on top.
    """

    def __init__(self, config: Optional[MapConfig] = None) -> None:
        self.config = config or MapConfig()
        self._points: Dict[int, _Point] = {}
        self._ids = count(1)
        self.center: Coordinate = tuple(self.config.center)
        self.zoom: int = self.config.zoom

    def add_point(self, coordinate: Coordinate, style_hint: StyleHint) -> int:
        handle = next(self._ids)
        self._points[handle] = _Point(coordinate=tuple(coordinate), style=style_hint)
        return handle

    def remove_point(self, handle: Handle) -> None:
        self._points.pop(handle, None)

    def pan_zoom_to(self, coordinate: Coordinate, zoom: int) -> None:
        self.center = (float(coordinate[0]), float(coordinate[1]))
        self.zoom = max(self.config.min_zoom, min(self.config.max_zoom, int(zoom)))

    def is_point_visible(self, handle: Handle) -> bool:
        return handle in self._points

    def __len__(self) -> int:
        return len(self._points)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def to_frame(self, key_for: Optional[KeyFn] = None) -> pd.DataFrame:
        rows = []
        for handle, point in self._points.items():
            style = point.style
            rows.append(
                {
                    "handle": handle,
                    "key": key_for(handle) if key_for is not None else handle,
                    "lat": point.coordinate[0],
                    "lng": point.coordinate[1],
                    "color": style.color,
                    "label": style.label,
                    "tooltip": style.tooltip.replace("\n", "<br>"),
                    "highlighted": style.highlighted,
                }
            )
        return pd.DataFrame.from_records(rows, columns=_FRAME_COLUMNS)

    def _layout_map(self) -> Dict[str, Any]:
        (south, west), (north, east) = self.config.bounds
        return dict(
            style=self.config.style,
            center=dict(lat=self.center[0], lon=self.center[1]),
            zoom=self.zoom,
            bounds=dict(west=west, east=east, south=south, north=north),
        )

    def to_figure(
        self,
        key_for: Optional[KeyFn] = None,
        title: Optional[str] = None,
        revision: Optional[str] = None,
    ) -> go.Figure:
        """
        Render the current points. `customdata` carries the key returned by
        `key_for` (the entry id), so click events resolve without coordinates.

        `revision` becomes the figure's uirevision: while it stays the same the
        browser keeps the user's own pan/zoom across re-renders.
        """
        data = self.to_frame(key_for)
        fig = go.Figure()

        highlighted = data[data["highlighted"].astype(bool)]
        if not highlighted.empty:
            fig.add_trace(
                go.Scattermap(
                    lat=highlighted["lat"],
                    lon=highlighted["lng"],
                    mode="markers",
                    marker=dict(size=HIGHLIGHT_SIZE, color=HIGHLIGHT_COLOR, opacity=0.7),
                    hoverinfo="skip",
                    showlegend=False,
                    name="highlight",
                )
            )

        fig.add_trace(
            go.Scattermap(
                lat=data["lat"],
                lon=data["lng"],
                mode="markers+text",
                marker=dict(size=MARKER_SIZE, color=data["color"].tolist(), opacity=0.95),
                text=data["label"].tolist(),
                textfont=dict(size=9, color="#ffffff"),
                hovertext=data["tooltip"].tolist(),
                hoverinfo="text",
                customdata=[[k] for k in data["key"].tolist()],
                showlegend=False,
                name="entries",
            )
        )

        fig.update_layout(
            map=self._layout_map(),
            margin=dict(l=0, r=0, t=40 if title else 0, b=0),
            height=self.config.height,
            clickmode="event",
            uirevision=revision or f"{self.center}-{self.zoom}",
        )
        if title:
            fig.update_layout(title=title)
        return fig


def clicked_key(click_data: Optional[Dict[str, Any]]) -> Optional[Any]:
    """Extract the key of the first clicked point from a dcc.Graph clickData payload."""
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)):
        custom = custom[0] if custom else None
    return custom

"""
Core domain layer: entries, dataset store, filter state/engine, selection
bridge and the map-widget capability surface.
"""

from .atlas import Atlas, AtlasStats
from .dataset import Dataset
from .entry import Entry
from .filter_engine import EmptyResultSet, FilterEngine, SearchOutcome, VisibleSet
from .filter_state import FilterState
from .selection import Presenter, SelectionBridge, SelectionStatus

__all__ = [
    "Atlas",
    "AtlasStats",
    "Dataset",
    "Entry",
    "EmptyResultSet",
    "FilterEngine",
    "FilterState",
    "Presenter",
    "SearchOutcome",
    "SelectionBridge",
    "SelectionStatus",
    "VisibleSet",
]

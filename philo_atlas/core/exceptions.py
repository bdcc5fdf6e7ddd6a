from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from philo_atlas.validation.errors import ValidationIssue


class AtlasError(Exception):
    """Base exception for all philo_atlas errors"""
    pass


class ConfigError(AtlasError):
    """Invalid or unreadable global.json / regions.json"""
    pass


class MalformedDatasetError(AtlasError):
    """
    The dataset payload does not have the expected shape:
    wrong top-level type, no entries, entries missing id/region/location,
    duplicated ids, etc.

    Recovered by the loader (sample dataset fallback), never surfaced to the UI.
    """

    def __init__(self, issues: List["ValidationIssue"]):
        self.issues = list(issues)
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in self.issues))


class NotFoundWarning(UserWarning):
    """A selection or lookup referenced an id that is not in the dataset"""
    pass

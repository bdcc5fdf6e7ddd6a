from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

Coordinate = Tuple[float, float]

_YEAR_RE = re.compile(r"\b(\d{3,4})\b")


def extract_century(era_text: Optional[str]) -> Optional[int]:
    """
    Derive a century from a free-text era such as "1126 - 1198".

    Every 3-4 digit number counts as a year; the mean of the positive years
    is divided by 100 and rounded up. Returns None when no year is found.
    """
    if not era_text:
        return None
    years = [int(y) for y in _YEAR_RE.findall(era_text)]
    years = [y for y in years if y > 0]
    if not years:
        return None
    avg_year = sum(years) / len(years)
    return math.ceil(avg_year / 100)


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Entry:
    """
    A single philosopher record.

    `id`, `region` and `coordinate` are required; everything else is display
    material. `era_tag` comes from the source "subcategory" field and is the
    only optional field used for filtering.
    """

    id: int
    region: str
    coordinate: Coordinate
    name: str = ""
    region_name: Optional[str] = None
    era_tag: Optional[str] = None
    era_range: Optional[str] = None
    area: Optional[str] = None
    concepts: Optional[str] = None
    city: Optional[str] = None
    works: Tuple[str, ...] = field(default_factory=tuple)
    color: Optional[str] = None

    @property
    def lat(self) -> float:
        return self.coordinate[0]

    @property
    def lng(self) -> float:
        return self.coordinate[1]

    @property
    def searchable_text(self) -> Tuple[str, ...]:
        fields = [
            self.name,
            self.area,
            self.concepts,
            self.era_tag,
            self.era_range,
            self.city,
            self.region_name,
            *self.works,
        ]
        return tuple(f for f in fields if f)

    @property
    def century(self) -> Optional[int]:
        return extract_century(self.era_range)

    def matches_search(self, term: str) -> bool:
        """Case-insensitive substring match against any searchable field."""
        if not term:
            return True
        term = term.lower()
        return any(term in f.lower() for f in self.searchable_text)

    def matches_era(self, active_tags) -> bool:
        if not active_tags:
            return True
        if not self.era_tag:
            return False
        return any(tag in self.era_tag for tag in active_tags)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> Entry:
        """
        Build an Entry from one item of the JSON payload.

        Assumes the item was validated already (id, region, coordinate present).
        """
        location = raw.get("location", raw.get("coordinate"))
        works = raw.get("works") or []
        if isinstance(works, str):
            works = [works]

        return cls(
            id=int(raw["id"]),
            region=str(raw["region"]),
            coordinate=(float(location[0]), float(location[1])),
            name=_clean_text(raw.get("name")) or f"#{raw['id']}",
            region_name=_clean_text(raw.get("regionName")),
            era_tag=_clean_text(raw.get("subcategory")),
            era_range=_clean_text(raw.get("era")),
            area=_clean_text(raw.get("area")),
            concepts=_clean_text(raw.get("concepts")),
            city=_clean_text(raw.get("city")),
            works=tuple(str(w) for w in works if w),
            color=_clean_text(raw.get("color")),
        )

    def to_record(self) -> Dict[str, Any]:
        """Flat dict used to build the Dataset frame and the map view data."""
        return {
            "id": self.id,
            "region": self.region,
            "lat": self.lat,
            "lng": self.lng,
            "name": self.name,
            "era_tag": self.era_tag,
            "era_range": self.era_range,
            "city": self.city,
            "color": self.color,
        }

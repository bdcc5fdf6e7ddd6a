from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

ALL_REGIONS = "all"

# Closed vocabulary of region tags; a region may be known without having entries
KNOWN_REGIONS = frozenset(
    {
        "espana",
        "portugal",
        "italia",
        "francia",
        "suiza",
        "belgica",
        "paises_bajos",
        "alemania",
        "austria",
        "república checa",
        "polonia",
        "estonia",
        "lituania",
        "rusia",
        "ucrania",
        "rumania",
        "bielorrusia",
        "moldavia",
        "grecia",
        "islas_britanicas",
        "suecia",
        "dinamarca",
        "noruega",
        "finlandia",
        "islandia",
    }
)


def normalise_search(text: Optional[str]) -> str:
    if not text:
        return ""
    return str(text).strip().lower()


@dataclass
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - region_filter: "all" or exactly one region tag.
    - active_era_tags: era tags toggled on (OR semantics). Kept as a list so the
      order the user clicked them survives the JSON round-trip; membership is
      what matters.
    - search_text: normalised (trimmed, lower-cased) search; "" means no search.
    - selected_id: id of the focused entry, or None.
    """

    region_filter: str = ALL_REGIONS
    active_era_tags: List[str] = field(default_factory=list)
    search_text: str = ""
    selected_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        selected = data.get("selected_id")
        return cls(
            region_filter=data.get("region_filter") or ALL_REGIONS,
            active_era_tags=list(dict.fromkeys(data.get("active_era_tags") or [])),
            search_text=normalise_search(data.get("search_text")),
            selected_id=int(selected) if selected is not None else None,
        )

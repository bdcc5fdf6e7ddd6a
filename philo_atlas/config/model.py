from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

DEFAULT_REGION_COLOR = "#3498db"

DEFAULT_REGION_COLORS: Dict[str, str] = {
    "espana": "#3498db",
    "portugal": "#2ecc71",
    "italia": "#e74c3c",
    "francia": "#9b59b6",
    "suiza": "#f1c40f",
    "belgica": "#e67e22",
    "paises_bajos": "#1abc9c",
    "alemania": "#7f8c8d",
    "austria": "#d35400",
    "república checa": "#27ae60",
    "polonia": "#c0392b",
    "estonia": "#2980b9",
    "lituania": "#8e44ad",
    "rusia": "#16a085",
    "ucrania": "#f1c40f",
    "rumania": "#e67e22",
    "bielorrusia": "#95a5a6",
    "moldavia": "#34495e",
    "grecia": "#1abc9c",
    "islas_britanicas": "#3498db",
    "suecia": "#9b59b6",
    "dinamarca": "#e74c3c",
    "noruega": "#2ecc71",
    "finlandia": "#34495e",
    "islandia": "#9b59b6",
}

DEFAULT_REGION_NAMES: Dict[str, str] = {
    "espana": "España",
    "portugal": "Portugal",
    "italia": "Italia",
    "francia": "Francia",
    "suiza": "Suiza",
    "belgica": "Bélgica",
    "paises_bajos": "Países Bajos",
    "alemania": "Alemania",
    "austria": "Austria",
    "república checa": "República Checa",
    "polonia": "Polonia",
    "estonia": "Estonia",
    "lituania": "Lituania",
    "rusia": "Rusia",
    "ucrania": "Ucrania",
    "rumania": "Rumanía",
    "bielorrusia": "Bielorrusia",
    "moldavia": "Moldavia",
    "grecia": "Grecia",
    "islas_britanicas": "Islas Británicas",
    "suecia": "Suecia",
    "dinamarca": "Dinamarca",
    "noruega": "Noruega",
    "finlandia": "Finlandia",
    "islandia": "Islandia",
}


@dataclass(frozen=True)
class MapConfig:
    """
    Initial viewport and zoom limits of the map (Europe by default).
    """
    center: Tuple[float, float] = (50.0, 15.0)
    zoom: int = 4
    min_zoom: int = 3
    max_zoom: int = 10
    # ((south, west), (north, east))
    bounds: Tuple[Tuple[float, float], Tuple[float, float]] = ((30.0, -25.0), (72.0, 50.0))
    select_zoom: int = 7
    focus_zoom: int = 8
    style: str = "carto-positron"
    height: int = 650


@dataclass(frozen=True)
class RegionStyles:
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_REGION_COLORS))
    names: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_REGION_NAMES))

    def color_for(self, region: str) -> str:
        return self.colors.get(region, DEFAULT_REGION_COLOR)

    def name_for(self, region: str) -> str:
        """Display name; unknown tags are shown capitalised."""
        if region in self.names:
            return self.names[region]
        return region[:1].upper() + region[1:]

    @property
    def tags(self) -> frozenset:
        """Every region tag with a configured colour or name."""
        return frozenset(self.colors) | frozenset(self.names)


@dataclass
class AtlasConfig:
    ui_title: str = "Atlas Filosófico Europeo"
    subtitle: str = "Filósofos europeos más allá del canon"
    data_source: Optional[str] = None
    map: MapConfig = field(default_factory=MapConfig)
    regions: RegionStyles = field(default_factory=RegionStyles)
    config_root: Optional[Path] = None
    methodology: List[str] = field(default_factory=list)

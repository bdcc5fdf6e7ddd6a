from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from philo_atlas.config.model import AtlasConfig, MapConfig, RegionStyles
from philo_atlas.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_SOURCE_ENV = "PHILO_ATLAS_DATA_SOURCE"


def _read_json(path: Path) -> Optional[Dict[str, Any]]:
    if not path.is_file():
        logger.warning(f"Config file not found at {path}; using defaults")
        return None
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return raw


def _resolve_source(raw_source: Optional[str], root: Path) -> Optional[str]:
    """URLs are kept as-is; relative paths are resolved against the config root."""
    if not raw_source:
        return None
    if raw_source.lower().startswith(("http://", "https://")):
        return raw_source
    path = Path(raw_source)
    if not path.is_absolute():
        path = (root / path).resolve()
    return str(path)


def _parse_map(raw: Dict[str, Any]) -> MapConfig:
    defaults = MapConfig()
    bounds = raw.get("bounds")
    return MapConfig(
        center=tuple(raw.get("center", defaults.center)),
        zoom=int(raw.get("zoom", defaults.zoom)),
        min_zoom=int(raw.get("min_zoom", defaults.min_zoom)),
        max_zoom=int(raw.get("max_zoom", defaults.max_zoom)),
        bounds=(tuple(bounds[0]), tuple(bounds[1])) if bounds else defaults.bounds,
        select_zoom=int(raw.get("select_zoom", defaults.select_zoom)),
        focus_zoom=int(raw.get("focus_zoom", defaults.focus_zoom)),
        style=raw.get("style", defaults.style),
        height=int(raw.get("height", defaults.height)),
    )


def _parse_regions(raw: Optional[Dict[str, Any]]) -> RegionStyles:
    styles = RegionStyles()
    if not raw:
        return styles
    colors = dict(styles.colors)
    colors.update(raw.get("colors", {}))
    names = dict(styles.names)
    names.update(raw.get("names", {}))
    return RegionStyles(colors=colors, names=names)


def load_global_config(root: Path | str) -> AtlasConfig:
    """
    Load configuration from a directory:

        <root>/global.json   title, data_source, map block
        <root>/regions.json  region colours and display names

    Missing files fall back to defaults. PHILO_ATLAS_DATA_SOURCE overrides the
    configured data source.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    raw_global = _read_json(root / "global.json") or {}
    raw_regions = _read_json(root / "regions.json")

    defaults = AtlasConfig()
    env_source = os.getenv(DATA_SOURCE_ENV)
    data_source = _resolve_source(env_source or raw_global.get("data_source"), root)

    config = AtlasConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        data_source=data_source,
        map=_parse_map(raw_global.get("map", {})),
        regions=_parse_regions(raw_regions),
        config_root=root,
        methodology=list(raw_global.get("methodology", [])),
    )

    logger.info(
        "Global config loaded",
        extra={"config_root": str(root), "data_source": data_source},
    )
    return config

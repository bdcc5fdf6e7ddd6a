from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import parse_qs

from philo_atlas.core.filter_state import FilterState

logger = logging.getLogger(__name__)

DEEP_LINK_PARAM = "philosopher"


def try_parse_filter_state(data: object) -> Optional[FilterState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return FilterState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid filter-state: %r", data)
        return None


def entry_id_from_query(search: Optional[str]) -> Optional[int]:
    """Read `?philosopher=<id>` from a dcc.Location search string."""
    if not search:
        return None
    values = parse_qs(search.lstrip("?")).get(DEEP_LINK_PARAM) or []
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        logger.warning("Ignoring malformed deep link", extra={"query": search})
        return None


def first_trigger_value(triggered: Any) -> Any:
    """Value of the first entry in dash.ctx.triggered, or None."""
    if not triggered:
        return None
    return triggered[0].get("value")

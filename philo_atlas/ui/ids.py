from __future__ import annotations

__all__ = ["IDs", "pattern_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        MAP_VIEWPORT = "map-viewport"

    class Control:
        URL = "url"

        # Filters
        REGION_FILTER = "region-filter"
        ERA_FILTER = "era-filter"
        SEARCH_INPUT = "philosopher-search"
        CLEAR_SEARCH_BTN = "clear-search"

        # Map + side panels
        MAP_GRAPH = "map"
        DETAIL_PANEL = "philosopher-details"
        LEGEND = "legend"

        # Stats
        VISIBLE_COUNT = "philosopher-count"
        TOTAL_COUNT = "total-count"
        REGION_COUNT = "region-count"
        CENTURY_RANGE = "century-range"
        CURRENT_DATE = "current-date"
        FALLBACK_BANNER = "fallback-banner"

        # Modal
        DETAIL_MODAL = "detail-modal"
        MODAL_TITLE = "modal-title"
        MODAL_BODY = "modal-body"
        MODAL_CLOSE_BTN = "modal-close"
        DATA_SOURCE_LINK = "data-source-link"

    class Pattern:
        # pattern-matching "type" strings
        REGION_BTN = "region-btn"
        ERA_BTN = "era-btn"
        RESULT_ITEM = "result-item"
        CLEAR_SEARCH_INLINE = "clear-search-inline"
        FOCUS_BTN = "focus-btn"
        MODAL_FOCUS_BTN = "modal-focus-btn"
        VIEW_DETAILS_BTN = "view-full-btn"
        CLEAR_SELECTION_BTN = "clear-selection-btn"


def pattern_id(kind: str, index) -> dict:
    return {"type": kind, "index": index}

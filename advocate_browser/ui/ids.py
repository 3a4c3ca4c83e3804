from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        # Full List, written only by the load callback
        ADVOCATES = "advocates-store"
        # Current search term, written only by the search/reset callback
        SEARCH_TERM = "search-term-store"

    class Control:
        # Initial load trigger (fires once per page session)
        LOAD_TRIGGER = "load-trigger"

        # Search panel
        SEARCH_INPUT = "search-input"
        SEARCH_TERM = "search-term"
        RESET_BTN = "reset-search-btn"
        LOAD_STATUS = "load-status"

        # Table panel
        ADVOCATE_TABLE = "advocate-table"
        RESULT_COUNT = "result-count"

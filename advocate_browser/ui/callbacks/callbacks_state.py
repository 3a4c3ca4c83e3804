from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output

from advocate_browser.core.state import BrowserState
from advocate_browser.services.advocate_service import LoadResult
from advocate_browser.ui.ids import IDs

if TYPE_CHECKING:
    from advocate_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Advocates could not be loaded. Please try again later."


def status_banner(result: LoadResult) -> Tuple[str, bool]:
    """Banner text + visibility for a load attempt."""
    if result.ok:
        return "", False
    return LOAD_FAILED_MESSAGE, True


def load_advocates(ctx: AppConfig) -> Tuple[Any, str, bool]:
    """
    Fetch the Full List for the advocates store.

    On failure the store is left as it was (no_update) and the banner opens.
    """
    state = BrowserState()
    result = ctx.advocate_service.load_into(state)
    banner, banner_open = status_banner(result)

    if not result.ok:
        return dash.no_update, banner, banner_open
    return state.advocates_to_store(), banner, banner_open


def update_search(triggered_id: Optional[str], search_value: Optional[str]) -> Tuple[str, Any, str]:
    """
    Returns (term store, input value, "Searching for" echo).

    The input itself is only written on reset.
    """
    if triggered_id == IDs.Control.RESET_BTN:
        logger.info("Resetting search")
        return "", "", ""

    if triggered_id == IDs.Control.SEARCH_INPUT:
        term = search_value or ""
        logger.info("Filtering advocates", extra={"search_term": term})
        return term, dash.no_update, term

    raise dash.exceptions.PreventUpdate


def register_state_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Initial load: the only writer of the advocates store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.ADVOCATES, "data"),
        Output(IDs.Control.LOAD_STATUS, "children"),
        Output(IDs.Control.LOAD_STATUS, "is_open"),
        Input(IDs.Control.LOAD_TRIGGER, "n_intervals"),
        prevent_initial_call=True,
    )
    def load_advocates_on_start(_n_intervals):
        return load_advocates(ctx)

    # ---------------------------------------------------------
    # Search / reset: the only writer of the search term store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SEARCH_TERM, "data"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.SEARCH_TERM, "children"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def update_search_term(search_value, _n_clicks):
        return update_search(dash.ctx.triggered_id, search_value)

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output, html

from advocate_browser.core.exceptions import RecordSchemaError
from advocate_browser.core.state import BrowserState, Phase
from advocate_browser.ui.ids import IDs
from advocate_browser.ui.table import render_table

if TYPE_CHECKING:
    from advocate_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

INVALID_STORE_MESSAGE = "Internal error: invalid advocate data."


def result_count_text(state: BrowserState) -> str:
    if state.phase is Phase.IDLE:
        return "Loading..."
    total = len(state.advocates)
    shown = len(state.display)
    if shown == total:
        return f"{total} advocates"
    return f"{shown} of {total} advocates"


def render_browser(
    ctx: AppConfig,
    advocates_data: Optional[list],
    search_term: Optional[str],
) -> Tuple[Any, str]:
    try:
        state = BrowserState.from_stores(advocates_data, search_term)
    except RecordSchemaError:
        logger.exception("Invalid advocates store in table callback")
        return html.Div(INVALID_STORE_MESSAGE, className="text-danger"), ""

    table = render_table(state.display, ctx.columns, ctx.settings.timestamp_format)
    return table, result_count_text(state)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Table: Full List + search term -> rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.ADVOCATE_TABLE, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Input(IDs.Store.ADVOCATES, "data"),
        Input(IDs.Store.SEARCH_TERM, "data"),
    )
    def render_advocate_table(advocates_data, search_term):
        return render_browser(ctx, advocates_data, search_term)

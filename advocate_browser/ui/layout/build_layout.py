from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from advocate_browser.ui.ids import IDs
from advocate_browser.ui.layout.build_navbar import build_navbar
from advocate_browser.ui.layout.build_search_panel import build_search_panel
from advocate_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from advocate_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    return dbc.Container(
        fluid=True,
        className="ab-root",
        children=[
            build_navbar(ctx.settings),

            # Page-session state; memory storage is dropped on reload
            dcc.Store(id=IDs.Store.ADVOCATES, storage_type="memory"),
            dcc.Store(id=IDs.Store.SEARCH_TERM, storage_type="memory", data=""),

            # Fires once to trigger the initial fetch
            dcc.Interval(id=IDs.Control.LOAD_TRIGGER, interval=1, max_intervals=1),

            dbc.Row(
                dbc.Col(
                    [
                        build_search_panel(),
                        build_table_panel(),
                    ],
                    md=12,
                    className="mt-3",
                ),
                className="gx-3",
            ),
        ],
    )

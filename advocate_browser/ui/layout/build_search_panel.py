from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from advocate_browser.ui.ids import IDs


def build_search_panel() -> dbc.Card:
    """
    Search card:

    - free-text search input
    - "Searching for" echo of the current term
    - reset button
    - load status banner (hidden until a load fails)
    """
    return dbc.Card(
        [
            dbc.CardHeader("Search", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.P(
                        [
                            "Searching for: ",
                            html.Span(id=IDs.Control.SEARCH_TERM, className="fw-semibold"),
                        ],
                        className="mb-2",
                    ),
                    dbc.InputGroup(
                        [
                            dcc.Input(
                                id=IDs.Control.SEARCH_INPUT,
                                type="text",
                                value="",
                                placeholder="Name, city, degree, specialty or years",
                                className="form-control",
                            ),
                            dbc.Button(
                                "Reset Search",
                                id=IDs.Control.RESET_BTN,
                                color="secondary",
                                n_clicks=0,
                            ),
                        ],
                    ),
                    dbc.Alert(
                        id=IDs.Control.LOAD_STATUS,
                        color="danger",
                        is_open=False,
                        className="mt-3 mb-0",
                    ),
                ]
            ),
        ],
        className="ab-search-card",
    )

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from advocate_browser.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                [
                    html.Span("Advocates", className="fw-semibold"),
                    html.Small(id=IDs.Control.RESULT_COUNT, className="text-muted ms-2"),
                ]
            ),
            dbc.CardBody(html.Div(id=IDs.Control.ADVOCATE_TABLE), className="p-2"),
        ],
        className="mt-3",
    )

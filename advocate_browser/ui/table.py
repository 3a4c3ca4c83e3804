from __future__ import annotations

from datetime import datetime
from typing import Any, List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from advocate_browser.config.model import DEFAULT_TIMESTAMP_FORMAT
from advocate_browser.core.columns import CellKind, ColumnDescriptor
from advocate_browser.core.record import Advocate

EMPTY_MESSAGE = "No advocates match your search."


def row_key(advocate: Advocate, index: int) -> str:
    """
    Stable identity for a table row.

    Uses the database id when there is one, else the position in the
    Display List. Positional keys may shift between searches; they are
    only used for re-render identity.
    """
    if advocate.id is not None:
        return str(advocate.id)
    return f"advocate-{index}"


def format_timestamp(value: datetime | None, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    if value is None:
        return ""
    return value.strftime(fmt)


def render_header(columns: Sequence[ColumnDescriptor]) -> html.Thead:
    return html.Thead(
        html.Tr([html.Th(col.label, key=col.key) for col in columns])
    )


def render_cell(
    advocate: Advocate,
    column: ColumnDescriptor,
    row_id: str,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> html.Td:
    value: Any = column.value(advocate)

    if column.kind is CellKind.SEQUENCE:
        children = [
            html.Div(item, key=f"{row_id}-{column.key}-{idx}", className="advocate-chip")
            for idx, item in enumerate(value or [])
        ]
    elif column.kind is CellKind.TIMESTAMP:
        children = format_timestamp(value, timestamp_format)
    else:
        children = "" if value is None else value

    return html.Td(children, key=column.key)


def render_rows(
    advocates: Sequence[Advocate],
    columns: Sequence[ColumnDescriptor],
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> List[html.Tr]:
    rows: List[html.Tr] = []
    for index, advocate in enumerate(advocates):
        rid = row_key(advocate, index)
        rows.append(
            html.Tr(
                [render_cell(advocate, col, rid, timestamp_format) for col in columns],
                key=rid,
            )
        )
    return rows


def render_table(
    advocates: Sequence[Advocate],
    columns: Sequence[ColumnDescriptor],
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> dbc.Table:
    """Header + one row per advocate, both driven by `columns`."""
    rows = render_rows(advocates, columns, timestamp_format)
    if not rows:
        rows = [
            html.Tr(
                html.Td(EMPTY_MESSAGE, colSpan=len(columns), className="text-muted text-center"),
                key="empty",
            )
        ]

    return dbc.Table(
        [render_header(columns), html.Tbody(rows)],
        bordered=True,
        hover=True,
        striped=True,
        responsive=True,
        size="sm",
        className="advocate-table",
    )

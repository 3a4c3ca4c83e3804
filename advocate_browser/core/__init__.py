"""
Core domain layer: advocate records, column configuration, the search
filter and the browser state that owns the record lists.
"""

from .columns import COLUMNS, CellKind, ColumnDescriptor
from .record import Advocate, parse_advocates
from .search import filter_advocates
from .state import BrowserState, Phase

__all__ = [
    "Advocate",
    "BrowserState",
    "CellKind",
    "COLUMNS",
    "ColumnDescriptor",
    "Phase",
    "filter_advocates",
    "parse_advocates",
]

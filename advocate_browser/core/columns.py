from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Tuple

from advocate_browser.core.record import Advocate


class CellKind(str, Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Pairs a record field key with its header label.

    The accessor reads the value for a row; `kind` selects the cell renderer.
    """
    key: str
    label: str
    accessor: Callable[[Advocate], Any]
    kind: CellKind = CellKind.SCALAR

    def value(self, advocate: Advocate) -> Any:
        return self.accessor(advocate)


# Single source of truth for table headers and cells (order = display order)
COLUMNS: Tuple[ColumnDescriptor, ...] = (
    ColumnDescriptor("firstName", "First Name", lambda a: a.first_name),
    ColumnDescriptor("lastName", "Last Name", lambda a: a.last_name),
    ColumnDescriptor("city", "City", lambda a: a.city),
    ColumnDescriptor("degree", "Degree", lambda a: a.degree),
    ColumnDescriptor("specialties", "Specialties", lambda a: a.specialties, CellKind.SEQUENCE),
    ColumnDescriptor("yearsOfExperience", "Years of Experience", lambda a: a.years_of_experience),
    ColumnDescriptor("phoneNumber", "Phone Number", lambda a: a.phone_number),
)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from advocate_browser.core.exceptions import RecordSchemaError

logger = logging.getLogger(__name__)

PAYLOAD_DATA_KEY = "data"


@dataclass(frozen=True)
class Advocate:
    """
    One advocate's profile as returned by the backend.

    Fields:

    - id: database identifier. Seed/mock data has none.
    - specialties: ordered, the order is what the table shows.
    - phone_number: stored as a number, so leading zeros are not preserved.
    - created_at: set once the record has been persisted.
    """

    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: List[str] = field(default_factory=list)
    years_of_experience: int = 0
    phone_number: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "city": self.city,
            "degree": self.degree,
            "specialties": list(self.specialties),
            "yearsOfExperience": self.years_of_experience,
            "phoneNumber": self.phone_number,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Advocate:
        if not isinstance(data, dict):
            raise RecordSchemaError(f"Advocate must be an object, got {type(data).__name__}")

        specialties = _require(data, "specialties", list)
        if not all(isinstance(s, str) for s in specialties):
            raise RecordSchemaError("Field 'specialties' must only contain strings")

        years = _require_int(data, "yearsOfExperience")
        if years < 0:
            raise RecordSchemaError(f"Field 'yearsOfExperience' must be >= 0, got {years}")

        raw_id = data.get("id")
        if raw_id is not None and not _is_int(raw_id):
            raise RecordSchemaError(f"Field 'id' must be an integer, got {raw_id!r}")

        return cls(
            id=raw_id,
            first_name=_require(data, "firstName", str),
            last_name=_require(data, "lastName", str),
            city=_require(data, "city", str),
            degree=_require(data, "degree", str),
            specialties=list(specialties),
            years_of_experience=years,
            phone_number=_require_int(data, "phoneNumber"),
            created_at=_parse_timestamp(data.get("createdAt")),
        )


def parse_advocates(payload: Any) -> List[Advocate]:
    """
    Validate the `{ "data": [...] }` envelope and build the records.

    Malformed records are logged and skipped; the rest keep their order.

    :raises RecordSchemaError: if the envelope itself is malformed.
    """
    if not isinstance(payload, dict) or PAYLOAD_DATA_KEY not in payload:
        raise RecordSchemaError(f"Expected an object with a '{PAYLOAD_DATA_KEY}' field")

    rows = payload[PAYLOAD_DATA_KEY]
    if not isinstance(rows, list):
        raise RecordSchemaError(f"Field '{PAYLOAD_DATA_KEY}' must be a list")

    advocates: List[Advocate] = []
    for idx, raw in enumerate(rows):
        try:
            advocates.append(Advocate.from_dict(raw))
        except RecordSchemaError as e:
            logger.warning(
                "Skipping malformed advocate",
                extra={"index": idx, "error": str(e)},
            )
    return advocates


# ---- helpers ----

def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count or phone number
    return isinstance(value, int) and not isinstance(value, bool)


def _require(data: Dict[str, Any], key: str, expected: type) -> Any:
    if key not in data or data[key] is None:
        raise RecordSchemaError(f"Missing required field '{key}'")
    value = data[key]
    if not isinstance(value, expected):
        raise RecordSchemaError(
            f"Field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _require_int(data: Dict[str, Any], key: str) -> int:
    if key not in data or data[key] is None:
        raise RecordSchemaError(f"Missing required field '{key}'")
    value = data[key]
    if not _is_int(value):
        raise RecordSchemaError(f"Field '{key}' must be an integer, got {value!r}")
    return value


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise RecordSchemaError(f"Field 'createdAt' must be an ISO-8601 string, got {value!r}")

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise RecordSchemaError(f"Field 'createdAt' is not a valid timestamp: {value!r}") from e

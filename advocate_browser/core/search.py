from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, List, Sequence

from advocate_browser.core.record import Advocate

logger = logging.getLogger(__name__)

# Text fields compared case-insensitively
TEXT_FIELDS = ("first_name", "last_name", "city", "degree")


def normalize_term(search_term: str | None) -> str:
    """Lower-case the term once; blank input normalizes to ""."""
    if search_term is None or not str(search_term).strip():
        return ""
    return str(search_term).lower()


def _text_matches(value: Any, term: str) -> bool:
    return isinstance(value, str) and term in value.lower()


def _specialties_match(value: Any, term: str) -> bool:
    if isinstance(value, str) or not isinstance(value, Iterable):
        return False
    return any(_text_matches(item, term) for item in value)


def _years_match(value: Any, term: str) -> bool:
    # Digits have no case, so the decimal string is compared as-is
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return term in str(value)


def matches(advocate: Advocate, term: str) -> bool:
    """
    True if any searchable field of `advocate` contains `term`.

    `term` must already be normalized (see normalize_term). Missing or
    wrongly-typed fields count as non-matching instead of raising.
    """
    if not term:
        return True

    for field_name in TEXT_FIELDS:
        if _text_matches(getattr(advocate, field_name, None), term):
            return True

    if _specialties_match(getattr(advocate, "specialties", None), term):
        return True

    return _years_match(getattr(advocate, "years_of_experience", None), term)


def filter_advocates(records: Sequence[Advocate], search_term: str | None) -> List[Advocate]:
    """
    Stable filter of `records` by `search_term`.

    Empty or whitespace-only terms return every record. The input sequence
    is never modified; the result only holds elements of `records`, in
    their original order.
    """
    term = normalize_term(search_term)
    if not term:
        return list(records)

    result = [adv for adv in records if matches(adv, term)]
    logger.debug(
        "Filtered advocates",
        extra={"search_term": term, "n_total": len(records), "n_matched": len(result)},
    )
    return result

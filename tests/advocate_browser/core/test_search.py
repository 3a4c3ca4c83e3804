from __future__ import annotations

from types import SimpleNamespace

import pytest

from advocate_browser.core.search import filter_advocates, matches, normalize_term
from conftest import make_advocate


def _is_ordered_subsequence(sub, full) -> bool:
    it = iter(full)
    return all(any(item is candidate for candidate in it) for item in sub)


@pytest.mark.parametrize("term", ["", "a", "jane", "BOS", "5", "onco", "zzz", "  "])
def test_filter_is_ordered_subsequence(advocates, term):
    result = filter_advocates(advocates, term)
    assert _is_ordered_subsequence(result, advocates)


def test_empty_term_returns_everything(advocates):
    result = filter_advocates(advocates, "")
    assert result == advocates
    # New list, input untouched
    assert result is not advocates


@pytest.mark.parametrize("term", [" ", "\t", "   \n", None])
def test_blank_term_returns_everything(advocates, term):
    assert filter_advocates(advocates, term) == advocates


def test_empty_records_returns_empty():
    assert filter_advocates([], "jane") == []


@pytest.mark.parametrize("term", ["a", "bos", "ph", "1"])
def test_filter_is_idempotent(advocates, term):
    once = filter_advocates(advocates, term)
    assert filter_advocates(once, term) == once


@pytest.mark.parametrize("term", ["jane", "smith", "austin", "phd", "neuro"])
def test_filter_is_case_insensitive(advocates, term):
    expected = filter_advocates(advocates, term)
    assert expected
    assert filter_advocates(advocates, term.upper()) == expected
    assert filter_advocates(advocates, term.lower()) == expected
    assert filter_advocates(advocates, term.title()) == expected


def test_years_match_as_decimal_substring():
    adv = make_advocate(years_of_experience=15)
    assert filter_advocates([adv], "5") == [adv]
    assert filter_advocates([adv], "15") == [adv]
    assert filter_advocates([adv], "51") == []


def test_specialty_match_any_element():
    adv = make_advocate(specialties=["Pediatrics", "Oncology"])
    assert filter_advocates([adv], "onco") == [adv]
    assert filter_advocates([adv], "PEDIA") == [adv]
    assert filter_advocates([adv], "cardio") == []


def test_each_text_field_is_searched():
    adv = make_advocate(
        first_name="Alpha", last_name="Bravo", city="Charlie", degree="Delta",
        specialties=["Echo"], years_of_experience=7,
    )
    for term in ("alp", "rav", "harl", "elt", "ech", "7"):
        assert matches(adv, normalize_term(term)), term


def test_phone_number_is_not_searched():
    adv = make_advocate(phone_number=5551234567, years_of_experience=10)
    assert filter_advocates([adv], "555") == []


def test_bos_scenario(jane, john):
    assert filter_advocates([jane, john], "bos") == [john]


def test_missing_fields_treated_as_non_match():
    broken = SimpleNamespace(first_name=None, city="Austin")
    other = make_advocate(first_name="Zed", city="Denver")

    assert filter_advocates([broken, other], "aus") == [broken]
    assert filter_advocates([broken, other], "zed") == [other]
    assert filter_advocates([broken], "10") == []


def test_wrongly_typed_fields_do_not_raise():
    odd = SimpleNamespace(
        first_name=42, last_name=None, city=["Austin"], degree="",
        specialties="Cardiology", years_of_experience="10",
    )
    assert filter_advocates([odd], "cardio") == []
    assert filter_advocates([odd], "10") == []


def test_surrounding_whitespace_is_part_of_term(jane):
    assert filter_advocates([jane], "jane ") == []

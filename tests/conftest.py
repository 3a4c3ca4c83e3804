from __future__ import annotations

from datetime import datetime, timezone

import pytest

from advocate_browser.core.record import Advocate


def make_advocate(**overrides) -> Advocate:
    values = dict(
        first_name="Jane",
        last_name="Doe",
        city="Austin",
        degree="MD",
        specialties=["Cardiology"],
        years_of_experience=10,
        phone_number=5551234567,
    )
    values.update(overrides)
    return Advocate(**values)


@pytest.fixture
def jane() -> Advocate:
    return make_advocate()


@pytest.fixture
def john() -> Advocate:
    return make_advocate(
        first_name="John",
        last_name="Smith",
        city="Boston",
        degree="PhD",
        specialties=["Neurology"],
        years_of_experience=5,
        phone_number=5559876543,
    )


@pytest.fixture
def advocates(jane, john) -> list[Advocate]:
    return [
        jane,
        john,
        make_advocate(
            id=3,
            first_name="Maria",
            last_name="Garcia",
            city="Chicago",
            degree="MSW",
            specialties=["Pediatrics", "Oncology"],
            years_of_experience=15,
            phone_number=5550001111,
            created_at=datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def payload(advocates) -> dict:
    return {"data": [a.to_dict() for a in advocates]}

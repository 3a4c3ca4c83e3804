from __future__ import annotations

from advocate_browser.core.columns import COLUMNS, CellKind


def test_columns_order_and_labels():
    assert [(c.key, c.label) for c in COLUMNS] == [
        ("firstName", "First Name"),
        ("lastName", "Last Name"),
        ("city", "City"),
        ("degree", "Degree"),
        ("specialties", "Specialties"),
        ("yearsOfExperience", "Years of Experience"),
        ("phoneNumber", "Phone Number"),
    ]


def test_column_keys_are_unique():
    keys = [c.key for c in COLUMNS]
    assert len(keys) == len(set(keys))


def test_accessors_read_matching_wire_field(advocates):
    for adv in advocates:
        raw = adv.to_dict()
        for col in COLUMNS:
            assert col.value(adv) == raw[col.key]


def test_only_specialties_is_a_sequence():
    kinds = {c.key: c.kind for c in COLUMNS}
    assert kinds.pop("specialties") is CellKind.SEQUENCE
    assert set(kinds.values()) == {CellKind.SCALAR}

from __future__ import annotations

from src.domain.algorithms import as_sequence


def test_single_object_becomes_one_element_sequence() -> None:
    point = {"Station": {"Name": "Tokyo", "code": "22828"}}
    assert as_sequence(point) == (point,)


def test_array_is_returned_unchanged_in_order() -> None:
    points = [{"n": 1}, {"n": 2}, {"n": 3}]
    assert as_sequence(points) == tuple(points)


def test_idempotent_on_sequences() -> None:
    once = as_sequence([{"n": 1}, {"n": 2}])
    assert as_sequence(once) == once


def test_missing_field_yields_empty_sequence() -> None:
    assert as_sequence(None) == ()
    assert as_sequence([]) == ()

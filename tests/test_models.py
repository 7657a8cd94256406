"""Tests for the assignment and overlap models."""
from datetime import date

import pytest

from models import Assignment, Overlap


def make(employee_id, project_id, start, end):
    return Assignment(employee_id, project_id, date.fromisoformat(start), date.fromisoformat(end))


def test_assignment_is_immutable():
    a = make(1, 10, "2023-01-01", "2023-01-10")
    with pytest.raises(AttributeError):
        a.employee_id = 2


def test_overlap_test_is_strict():
    a = make(1, 10, "2023-01-01", "2023-01-05")
    b = make(2, 10, "2023-01-05", "2023-01-10")
    assert not a.overlaps(b), "Touching intervals must not overlap"
    assert not b.overlaps(a)


def test_overlap_days_is_symmetric():
    a = make(1, 10, "2023-01-01", "2023-01-10")
    b = make(2, 10, "2023-01-05", "2023-01-15")
    assert a.overlaps(b) and b.overlaps(a)
    assert a.overlap_days(b) == b.overlap_days(a) == 5


def test_overlap_days_of_contained_interval():
    outer = make(1, 10, "2022-01-01", "2022-12-31")
    inner = make(2, 10, "2022-03-01", "2022-03-31")
    assert outer.overlap_days(inner) == 30


def test_overlap_days_never_negative():
    a = make(1, 10, "2023-01-01", "2023-01-05")
    b = make(2, 10, "2023-02-01", "2023-02-05")
    assert a.overlap_days(b) == 0


def test_overlap_record_orders_employee_ids():
    first = Overlap(7, 3, 10, 4)
    second = Overlap(3, 7, 10, 4)
    assert first.pair == (3, 7)
    assert first == second
    assert first.as_row() == (3, 7, 10, 4)


def test_overlap_record_rejects_negative_days():
    with pytest.raises(ValueError):
        Overlap(1, 2, 10, -1)


def test_overlap_record_allows_zero_days():
    assert Overlap(1, 2, 10, 0).overlap_days == 0


def test_overlap_involves_either_order():
    overlap = Overlap(1, 2, 10, 5)
    assert overlap.involves(1, 2)
    assert overlap.involves(2, 1)
    assert not overlap.involves(1, 3)


def test_overlap_between_assignments():
    a = make(2, 10, "2023-01-05", "2023-01-15")
    b = make(1, 10, "2023-01-01", "2023-01-10")
    overlap = Overlap.between(a, b)
    assert overlap == Overlap(1, 2, 10, 5)

"""Tests for the pairwise and sweep-line overlap finders."""
from datetime import date

import pytest

from models import Assignment, Overlap
from overlap.grouping import group_by_project
from overlap.pairwise import PairwiseOverlapFinder
from overlap.sweep import SweepLineOverlapFinder
from utils.generators import DataGenerator

FINDERS = [PairwiseOverlapFinder, SweepLineOverlapFinder]


def make(employee_id, project_id, start, end):
    return Assignment(employee_id, project_id, date.fromisoformat(start), date.fromisoformat(end))


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_two_overlapping_employees(finder_cls):
    members = [
        make(1, 10, "2023-01-01", "2023-01-10"),
        make(2, 10, "2023-01-05", "2023-01-15"),
    ]
    overlaps = finder_cls().find_in_group(members)
    assert overlaps == [Overlap(1, 2, 10, 5)]


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_touching_intervals_produce_nothing(finder_cls):
    members = [
        make(1, 10, "2023-01-01", "2023-01-05"),
        make(2, 10, "2023-01-05", "2023-01-10"),
    ]
    assert finder_cls().find_in_group(members) == []


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_three_mutually_overlapping_employees(finder_cls):
    members = [
        make(1, 10, "2023-01-01", "2023-03-01"),
        make(2, 10, "2023-01-15", "2023-02-15"),
        make(3, 10, "2023-02-01", "2023-04-01"),
    ]
    overlaps = finder_cls().find_in_group(members)

    assert len(overlaps) == 3, "Each unordered pair must be reported exactly once"
    assert {o.project_id for o in overlaps} == {10}
    assert {o.pair for o in overlaps} == {(1, 2), (1, 3), (2, 3)}


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_same_employee_twice_is_not_a_pair(finder_cls):
    members = [
        make(1, 10, "2023-01-01", "2023-03-01"),
        make(1, 10, "2023-02-01", "2023-04-01"),
    ]
    assert finder_cls().find_in_group(members) == []


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_zero_day_overlap_policy(finder_cls):
    # A zero-length assignment strictly inside another one intersects it
    # without sharing a whole day
    members = [
        make(1, 10, "2023-01-01", "2023-01-31"),
        make(2, 10, "2023-01-10", "2023-01-10"),
    ]
    assert finder_cls().find_in_group(members) == [Overlap(1, 2, 10, 0)]
    dropped = finder_cls(keep_zero_day_overlaps=False).find_in_group(members)
    assert dropped == [], "Zero-day records must be droppable on request"


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_find_all_skips_single_member_projects(finder_cls):
    groups = group_by_project([
        make(1, 10, "2023-01-01", "2023-01-10"),
        make(2, 20, "2023-01-01", "2023-01-10"),
    ])
    assert finder_cls().find_all(groups) == []


@pytest.mark.parametrize("finder_cls", FINDERS)
def test_pair_on_two_projects_yields_two_records(finder_cls):
    groups = group_by_project([
        make(1, 10, "2023-01-01", "2023-01-10"),
        make(2, 10, "2023-01-05", "2023-01-15"),
        make(2, 20, "2023-03-01", "2023-03-20"),
        make(1, 20, "2023-03-10", "2023-04-01"),
    ])
    overlaps = finder_cls().find_all(groups)
    assert overlaps == [Overlap(1, 2, 10, 5), Overlap(1, 2, 20, 10)]


def test_sweep_matches_pairwise_on_generated_data():
    generator = DataGenerator(seed=7)
    assignments = generator.generate_assignments(
        num_employees=60, num_projects=5, assignments_per_employee=3
    )
    groups = group_by_project(assignments)

    pairwise = PairwiseOverlapFinder().find_all(groups)
    sweep = SweepLineOverlapFinder().find_all(groups)

    assert pairwise, "Generated data should contain overlaps"
    assert pairwise == sweep


def test_sweep_handles_identical_start_dates():
    members = [
        make(1, 10, "2023-01-01", "2023-01-20"),
        make(2, 10, "2023-01-01", "2023-01-05"),
        make(3, 10, "2023-01-01", "2023-01-01"),
        make(4, 10, "2023-01-05", "2023-01-25"),
    ]
    expected = sorted(PairwiseOverlapFinder().find_in_group(members), key=lambda o: o.pair)
    actual = sorted(SweepLineOverlapFinder().find_in_group(members), key=lambda o: o.pair)
    assert actual == expected
    assert [o.pair for o in actual] == [(1, 2), (1, 4)]


def test_parallel_fan_out_matches_sequential():
    generator = DataGenerator(seed=11)
    assignments = generator.generate_assignments(num_employees=40, num_projects=8)
    groups = group_by_project(assignments)
    finder = PairwiseOverlapFinder()

    sequential = finder.find_all(groups, n_jobs=1)
    parallel = finder.find_all(groups, n_jobs=4, backend="threading")
    assert sequential == parallel


def test_find_all_is_idempotent():
    groups = group_by_project([
        make(3, 10, "2023-01-01", "2023-02-01"),
        make(1, 10, "2023-01-10", "2023-03-01"),
        make(2, 10, "2023-01-20", "2023-01-25"),
    ])
    finder = SweepLineOverlapFinder()
    assert finder.find_all(groups) == finder.find_all(groups)

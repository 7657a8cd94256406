"""Tests for overlap metrics and derived views."""
from models import Overlap
from analysis.metrics import build_collaboration_graph, compute_overlap_metrics, overlaps_to_frame

OVERLAPS = [Overlap(1, 2, 10, 10), Overlap(2, 1, 20, 4), Overlap(1, 3, 10, 7)]


def test_metrics_summary():
    metrics = compute_overlap_metrics(OVERLAPS)
    assert metrics["overlap_records"] == 3
    assert metrics["employee_pairs"] == 2
    assert metrics["projects_with_overlaps"] == 2
    assert metrics["collaborating_employees"] == 3
    assert metrics["max_overlap_days"] == 10
    assert metrics["median_overlap_days"] == 7
    assert metrics["total_overlap_days"] == 21


def test_metrics_of_empty_input():
    metrics = compute_overlap_metrics([])
    assert metrics["overlap_records"] == 0
    assert metrics["mean_overlap_days"] == 0.0


def test_overlaps_to_frame():
    df = overlaps_to_frame(OVERLAPS)
    assert list(df.columns) == ["employee_1_id", "employee_2_id", "project_id", "overlap_days"]
    assert df["overlap_days"].sum() == 21


def test_collaboration_graph_sums_days():
    graph = build_collaboration_graph(OVERLAPS)
    assert graph[1][2]["weight"] == 14
    assert sorted(graph[1][2]["projects"]) == [10, 20]
    assert graph.number_of_edges() == 2

"""Tests for plots and the Excel export."""
from datetime import date

from openpyxl import load_workbook

from models import Assignment, CollaborationResult, Overlap
from visualization import draw_collaboration_graph, export_to_excel, plot_pair_timeline

ASSIGNMENTS = [
    Assignment(1, 10, date(2023, 1, 1), date(2023, 1, 10)),
    Assignment(2, 10, date(2023, 1, 5), date(2023, 1, 15)),
]
OVERLAPS = [Overlap(1, 2, 10, 5)]
RESULT = CollaborationResult(1, 2, 5, 5, tuple(OVERLAPS))


def test_export_to_excel(tmp_path):
    path = tmp_path / "report" / "overlaps.xlsx"
    assert export_to_excel(str(path), ASSIGNMENTS, OVERLAPS, RESULT, {"overlap_records": 1})

    wb = load_workbook(str(path))
    assert wb.sheetnames == ["Assignments", "Overlaps", "Longest Pair", "Summary"]
    assert wb["Overlaps"].cell(row=2, column=4).value == 5
    assert wb["Longest Pair"].cell(row=3, column=1).value == "TOTAL"


def test_export_without_result(tmp_path):
    path = tmp_path / "empty.xlsx"
    assert export_to_excel(str(path), ASSIGNMENTS, [], None)
    wb = load_workbook(str(path))
    assert wb["Longest Pair"].cell(row=2, column=1).value == "No 2 employees have worked together."


def test_plots_are_saved(tmp_path):
    timeline = tmp_path / "plots" / "timeline.png"
    graph = tmp_path / "plots" / "graph.png"

    plot_pair_timeline(RESULT, ASSIGNMENTS, filename=str(timeline))
    draw_collaboration_graph(OVERLAPS, highlight=RESULT, filename=str(graph))

    assert timeline.exists()
    assert graph.exists()

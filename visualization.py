"""
Visualization and export utilities for overlap analysis results.

Plots are drawn with matplotlib (and networkx for the collaboration graph);
the Excel report is written with openpyxl.
"""

import os
import matplotlib.pyplot as plt
import matplotlib.dates as mdates
import matplotlib.patches as mpatches
import networkx as nx
from typing import Dict, Optional, Sequence
from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import PatternFill, Font, Alignment

from models import Assignment, Overlap, CollaborationResult
from analysis.metrics import build_collaboration_graph
from utils.logger import logger


def _finish_figure(filename: Optional[str], description: str) -> None:
    """Save the current figure if a filename is given, otherwise display it."""
    if filename:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        plt.savefig(filename, dpi=150, bbox_inches="tight")
        logger.info(f"{description} saved as {filename}")
        plt.close()
    else:
        plt.show()


def plot_pair_timeline(
    result: CollaborationResult,
    assignments: Sequence[Assignment],
    filename: Optional[str] = None,
) -> None:
    """
    Draw a Gantt chart of both employees' assignments on their shared projects.

    Args:
        result: The winning pair
        assignments: All assignments (filtered to the pair's shared projects here)
        filename: File to save the plot (None to display only)
    """
    shared_projects = sorted({o.project_id for o in result.projects})
    employees = [result.employee_1_id, result.employee_2_id]
    colors = {result.employee_1_id: "#3498db", result.employee_2_id: "#e67e22"}

    fig, ax = plt.subplots(figsize=(12, 1.2 + 0.9 * len(shared_projects)))

    for row, project_id in enumerate(shared_projects):
        for offset, employee_id in enumerate(employees):
            for a in assignments:
                if a.project_id != project_id or a.employee_id != employee_id:
                    continue
                start = mdates.date2num(a.date_from)
                width = max(mdates.date2num(a.date_to) - start, 1)
                ax.barh(
                    row + (offset - 0.5) * 0.35,
                    width,
                    left=start,
                    height=0.3,
                    color=colors[employee_id],
                    edgecolor="black",
                    alpha=0.8,
                )

    # Annotate each project with the number of shared days
    for row, project_id in enumerate(shared_projects):
        days = sum(o.overlap_days for o in result.projects if o.project_id == project_id)
        ax.text(1.01, row, f"{days} days", transform=ax.get_yaxis_transform(), va="center")

    ax.set_yticks(range(len(shared_projects)))
    ax.set_yticklabels([f"Project {pid}" for pid in shared_projects])
    ax.xaxis_date()
    ax.xaxis.set_major_formatter(mdates.DateFormatter("%Y-%m"))
    ax.grid(axis="x", linestyle="--", alpha=0.3)
    ax.legend(
        handles=[mpatches.Patch(color=colors[e], label=f"Employee {e}") for e in employees],
        loc="upper left",
    )
    ax.set_title(
        f"Employees {result.employee_1_id} and {result.employee_2_id}: "
        f"{result.total_days} days together"
    )
    fig.autofmt_xdate()
    plt.tight_layout()

    _finish_figure(filename, "Pair timeline")


def draw_collaboration_graph(
    overlaps: Sequence[Overlap],
    highlight: Optional[CollaborationResult] = None,
    filename: Optional[str] = None,
) -> None:
    """
    Draw employees as nodes and shared time as weighted edges.

    Args:
        overlaps: All overlap records
        highlight: Pair whose edge is drawn in red
        filename: File to save the plot (None to display only)
    """
    G = build_collaboration_graph(overlaps)
    if G.number_of_nodes() == 0:
        logger.warning("No collaborations to draw.")
        return

    plt.figure(figsize=(12, 9))
    pos = nx.spring_layout(G, seed=42, weight="weight")

    max_weight = max(d["weight"] for _, _, d in G.edges(data=True)) or 1
    widths = [0.5 + 4.5 * d["weight"] / max_weight for _, _, d in G.edges(data=True)]
    edge_colors = [
        "red" if highlight is not None and tuple(sorted((u, v))) == highlight.pair else "gray"
        for u, v in G.edges()
    ]

    nx.draw_networkx_nodes(G, pos, node_size=600, node_color="#9ecae1", edgecolors="black")
    nx.draw_networkx_edges(G, pos, width=widths, edge_color=edge_colors, alpha=0.7)
    nx.draw_networkx_labels(G, pos, font_size=9, font_weight="bold")

    plt.title("Employee Collaboration Graph (edge width = days together)", fontsize=14)
    plt.axis("off")
    plt.tight_layout()

    _finish_figure(filename, "Collaboration graph")


def _style_header(ws) -> None:
    header_fill = PatternFill(start_color="D0D0D0", end_color="D0D0D0", fill_type="solid")
    header_font = Font(bold=True)
    center_align = Alignment(horizontal="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = center_align


def export_to_excel(
    filename: str,
    assignments: Sequence[Assignment],
    overlaps: Sequence[Overlap],
    result: Optional[CollaborationResult],
    metrics: Optional[Dict[str, float]] = None,
) -> bool:
    """
    Export the analysis to an Excel workbook.

    Args:
        filename: File to save the Excel spreadsheet
        assignments: Parsed assignments
        overlaps: All overlap records
        result: The winning pair, or None
        metrics: Summary metrics from compute_overlap_metrics

    Returns:
        bool: True if export successful
    """
    wb = Workbook()

    ws1 = wb.active
    ws1.title = "Assignments"
    ws1.append(["Employee ID", "Project ID", "Date From", "Date To", "Days"])
    _style_header(ws1)
    for a in assignments:
        ws1.append([
            a.employee_id,
            a.project_id,
            a.date_from.isoformat(),
            a.date_to.isoformat(),
            a.duration_days,
        ])

    ws2 = wb.create_sheet("Overlaps")
    ws2.append(["Employee ID #1", "Employee ID #2", "Project ID", "Days Worked"])
    _style_header(ws2)
    for o in overlaps:
        ws2.append(list(o.as_row()))

    ws3 = wb.create_sheet("Longest Pair")
    ws3.append(["Employee ID #1", "Employee ID #2", "Project ID", "Days Worked"])
    _style_header(ws3)
    if result is None:
        ws3.append(["No 2 employees have worked together."])
    else:
        for o in result.projects:
            ws3.append(list(o.as_row()))
        ws3.append(["TOTAL", "", "", result.total_days])
        for cell in ws3[ws3.max_row]:
            cell.font = Font(bold=True)

    ws4 = wb.create_sheet("Summary")
    ws4.append(["Metric", "Value"])
    _style_header(ws4)
    for name, value in (metrics or {}).items():
        ws4.append([name.replace("_", " ").title(), round(value, 2)])

    # Adjust column widths for better readability
    for sheet in wb.worksheets:
        for col in sheet.columns:
            max_len = 0
            col_letter = get_column_letter(col[0].column)
            for cell in col:
                if cell.value is not None:
                    max_len = max(max_len, len(str(cell.value)))
            sheet.column_dimensions[col_letter].width = max_len + 2

    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    try:
        wb.save(filename)
        logger.info(f"Excel report saved as '{filename}'")
        return True
    except OSError as e:
        logger.error(f"Error saving Excel report: {e}")
        return False

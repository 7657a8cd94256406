"""
Summary statistics and derived views of overlap records.
"""
import numpy as np
import pandas as pd
import networkx as nx
from typing import Dict, Sequence
from models import Overlap
from utils.logger import logger

OVERLAP_COLUMNS = ["employee_1_id", "employee_2_id", "project_id", "overlap_days"]


def compute_overlap_metrics(overlaps: Sequence[Overlap]) -> Dict[str, float]:
    """
    Compute summary statistics for a set of overlap records.

    Args:
        overlaps: Overlap records

    Returns:
        Dict of metric names to metric values
    """
    days = np.array([o.overlap_days for o in overlaps], dtype=float)
    pairs = {o.pair for o in overlaps}
    projects = {o.project_id for o in overlaps}
    employees = {e for pair in pairs for e in pair}

    metrics = {
        "overlap_records": len(overlaps),
        "employee_pairs": len(pairs),
        "projects_with_overlaps": len(projects),
        "collaborating_employees": len(employees),
        "mean_overlap_days": float(np.mean(days)) if days.size else 0.0,
        "median_overlap_days": float(np.median(days)) if days.size else 0.0,
        "max_overlap_days": float(np.max(days)) if days.size else 0.0,
        "total_overlap_days": float(np.sum(days)) if days.size else 0.0,
    }
    logger.debug(f"Overlap metrics: {metrics}")
    return metrics


def overlaps_to_frame(overlaps: Sequence[Overlap]) -> pd.DataFrame:
    """Convert overlap records to a DataFrame, one row per record."""
    return pd.DataFrame([o.as_row() for o in overlaps], columns=OVERLAP_COLUMNS)


def build_collaboration_graph(overlaps: Sequence[Overlap]) -> nx.Graph:
    """
    Build an undirected graph of employees who worked together.

    Edges carry the summed overlap days in "weight" and the shared project IDs
    in "projects".
    """
    graph = nx.Graph()
    for overlap in overlaps:
        a, b = overlap.pair
        if graph.has_edge(a, b):
            graph[a][b]["weight"] += overlap.overlap_days
            graph[a][b]["projects"].append(overlap.project_id)
        else:
            graph.add_edge(a, b, weight=overlap.overlap_days, projects=[overlap.project_id])
    return graph

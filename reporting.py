"""
Console report for the longest collaborating pair.
"""
import json
import os
from typing import Any, Dict, List, Optional
from models import CollaborationResult
from utils.logger import logger

NO_PAIR_MESSAGE = "No 2 employees have worked together."
TABLE_HEADER = "Employee ID #1, Employee ID #2, Project ID, Days Worked"


def format_report(result: Optional[CollaborationResult]) -> List[str]:
    """
    Render the analysis result as lines of text.

    Args:
        result: The winning pair, or None if no two employees overlapped

    Returns:
        List[str]: Report lines, without trailing newlines
    """
    if result is None:
        return [NO_PAIR_MESSAGE]

    lines = [
        f"Employees which have worked the longest together are with IDs "
        f"{result.employee_1_id} and {result.employee_2_id} "
        f"with {result.overlap_days} days.",
        "Common projects for the longest working pair:",
        TABLE_HEADER,
    ]
    for overlap in result.projects:
        lines.append(", ".join(str(value) for value in overlap.as_row()))

    if len(result.projects) > 1:
        lines.append(f"Total days worked together: {result.total_days}")
    return lines


def result_to_dict(result: Optional[CollaborationResult]) -> Dict[str, Any]:
    """Convert the analysis result to a JSON-serializable dictionary."""
    if result is None:
        return {"found": False}
    return {
        "found": True,
        "employee_1_id": result.employee_1_id,
        "employee_2_id": result.employee_2_id,
        "overlap_days": result.overlap_days,
        "total_days": result.total_days,
        "projects": [
            {"project_id": o.project_id, "overlap_days": o.overlap_days}
            for o in result.projects
        ],
    }


def save_summary(
    filename: str,
    result: Optional[CollaborationResult],
    metrics: Dict[str, float],
) -> None:
    """Write the result and overlap metrics to a JSON file."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, "w") as f:
        json.dump({"result": result_to_dict(result), "metrics": metrics}, f, indent=2)
    logger.info(f"Summary saved to {filename}")

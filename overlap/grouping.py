"""
Grouping of assignments by project.
"""
from typing import Dict, Iterable, List
from models import Assignment
from utils.logger import logger


def group_by_project(assignments: Iterable[Assignment]) -> Dict[int, List[Assignment]]:
    """
    Partition assignments by project id.

    Args:
        assignments: Assignment records in any order

    Returns:
        Dict mapping project IDs to the assignments on that project, in input order
    """
    groups: Dict[int, List[Assignment]] = {}
    for assignment in assignments:
        groups.setdefault(assignment.project_id, []).append(assignment)

    logger.debug(f"Grouped assignments into {len(groups)} projects.")
    return groups


def teams_with_collaborators(
    groups: Dict[int, List[Assignment]]
) -> Dict[int, List[Assignment]]:
    """Keep only projects with at least two assignments."""
    return {pid: members for pid, members in groups.items() if len(members) > 1}

"""
Validation utilities for assignment records.
"""
from typing import List
from models import Assignment
from utils.logger import logger


def validate_assignments(assignments: List[Assignment]) -> bool:
    """
    Validate assignments before the overlap analysis.

    Checks:
    1. Every assignment ends on or after the day it starts
    2. Exact duplicate rows are reported (as warnings, they are still valid)

    Args:
        assignments: List of assignments

    Returns:
        bool: True if assignments are valid, False otherwise
    """
    valid = True
    seen = set()

    for assignment in assignments:
        if assignment.date_from > assignment.date_to:
            logger.error(
                f"Employee {assignment.employee_id} on project {assignment.project_id} "
                f"ends ({assignment.date_to}) before it starts ({assignment.date_from})."
            )
            valid = False

        if assignment in seen:
            logger.warning(f"Duplicate assignment row: {assignment}")
        seen.add(assignment)

    return valid

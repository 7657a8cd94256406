"""
Selection of the employee pair that worked together the longest.
"""
from typing import Dict, List, Optional, Sequence, Tuple
from models import Overlap, CollaborationResult
from overlap.interfaces import sort_overlaps
from utils.logger import logger

RANKING_MODES = ("record", "total")


def pair_breakdown(
    overlaps: Sequence[Overlap], employee_a: int, employee_b: int
) -> List[Overlap]:
    """
    Collect every overlap record of a pair across all shared projects.

    Args:
        overlaps: All overlap records
        employee_a: First employee ID
        employee_b: Second employee ID (order does not matter)

    Returns:
        List of the pair's overlap records ordered by project ID
    """
    matches = [o for o in overlaps if o.involves(employee_a, employee_b)]
    return sorted(matches, key=lambda o: (o.project_id, o.overlap_days))


def total_days_by_pair(overlaps: Sequence[Overlap]) -> Dict[Tuple[int, int], int]:
    """Sum overlap days per employee pair."""
    totals: Dict[Tuple[int, int], int] = {}
    for overlap in overlaps:
        totals[overlap.pair] = totals.get(overlap.pair, 0) + overlap.overlap_days
    return totals


def select_longest_collaboration(
    overlaps: Sequence[Overlap], rank_by: str = "record"
) -> Optional[CollaborationResult]:
    """
    Find the pair of employees who worked together the longest.

    With rank_by="record" the winner is the pair owning the single longest
    overlap record; with rank_by="total" it is the pair with the most days
    summed over all shared projects. Ties go to the lowest employee ID pair,
    then the lowest project ID.

    Args:
        overlaps: All overlap records (may be empty)
        rank_by: Either "record" or "total"

    Returns:
        CollaborationResult for the winning pair, or None if no two employees overlap
    """
    if rank_by not in RANKING_MODES:
        raise ValueError(f"Unknown ranking mode '{rank_by}', expected one of {RANKING_MODES}")

    if not overlaps:
        logger.info("No overlapping pairs found.")
        return None

    ordered = sort_overlaps(list(overlaps))

    if rank_by == "record":
        # max() keeps the first of equal keys, i.e. the lowest pair and project
        winner = max(ordered, key=lambda o: o.overlap_days)
        winning_pair = winner.pair
        winning_days = winner.overlap_days
    else:
        totals = total_days_by_pair(ordered)
        winning_pair = max(sorted(totals), key=lambda pair: totals[pair])
        winning_days = totals[winning_pair]

    projects = pair_breakdown(ordered, *winning_pair)
    result = CollaborationResult(
        employee_1_id=winning_pair[0],
        employee_2_id=winning_pair[1],
        overlap_days=winning_days,
        total_days=sum(o.overlap_days for o in projects),
        projects=tuple(projects),
    )

    logger.info(
        f"Longest collaboration: employees {result.employee_1_id} and "
        f"{result.employee_2_id} with {result.overlap_days} days "
        f"across {len(result.projects)} project(s)."
    )
    return result

"""
End-to-end overlap analysis: group, find overlaps, select the longest pair.
"""
from typing import List, Optional, Sequence, Tuple
from models import Assignment, Overlap, CollaborationResult
from config import OverlapConfig
from overlap.grouping import group_by_project
from overlap.interfaces import OverlapFinder
from overlap.pairwise import PairwiseOverlapFinder
from overlap.sweep import SweepLineOverlapFinder
from analysis.selection import select_longest_collaboration
from utils.logger import logger

FINDERS = {
    "pairwise": PairwiseOverlapFinder,
    "sweep": SweepLineOverlapFinder,
}


def create_finder(strategy: str, keep_zero_day_overlaps: bool = True) -> OverlapFinder:
    """Return an overlap finder by strategy name."""
    try:
        finder_cls = FINDERS[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown overlap strategy '{strategy}', expected one of {sorted(FINDERS)}"
        ) from None
    return finder_cls(keep_zero_day_overlaps=keep_zero_day_overlaps)


def find_overlaps(
    assignments: Sequence[Assignment], config: Optional[OverlapConfig] = None
) -> List[Overlap]:
    """
    Compute every overlap record for a set of assignments.

    Args:
        assignments: Parsed assignment records
        config: Overlap configuration (defaults are used if omitted)

    Returns:
        List of overlap records in a deterministic order
    """
    config = config or OverlapConfig()
    finder = create_finder(config.strategy, config.keep_zero_day_overlaps)
    groups = group_by_project(assignments)
    return finder.find_all(groups, n_jobs=config.n_jobs, backend=config.backend)


def find_longest_collaboration(
    assignments: Sequence[Assignment], config: Optional[OverlapConfig] = None
) -> Tuple[List[Overlap], Optional[CollaborationResult]]:
    """
    Run the full analysis.

    Returns:
        Tuple of all overlap records and the winning pair (None if no pair overlaps)
    """
    config = config or OverlapConfig()
    logger.info(f"Analysing {len(assignments)} assignments...")
    overlaps = find_overlaps(assignments, config)
    result = select_longest_collaboration(overlaps, rank_by=config.rank_by)
    return overlaps, result

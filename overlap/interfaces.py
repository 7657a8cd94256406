"""
Interfaces for overlap finders.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from joblib import Parallel, delayed
from models import Assignment, Overlap
from utils.logger import logger


def sort_overlaps(overlaps: List[Overlap]) -> List[Overlap]:
    """Put overlap records into a stable order: pair first, then project."""
    return sorted(
        overlaps,
        key=lambda o: (o.employee_1_id, o.employee_2_id, o.project_id, o.overlap_days),
    )


class OverlapFinder(ABC):
    """Base interface for finding overlapping assignments within a project."""

    def __init__(self, keep_zero_day_overlaps: bool = True):
        """
        Initialize the finder.

        Args:
            keep_zero_day_overlaps: Emit records for pairs that intersect but share no
                whole day (only possible with zero-length assignments). Set to False
                to drop them
        """
        self.keep_zero_day_overlaps = keep_zero_day_overlaps

    @abstractmethod
    def find_in_group(self, members: Sequence[Assignment]) -> List[Overlap]:
        """
        Find every overlapping pair among the assignments of one project.

        Args:
            members: Assignments that all belong to the same project

        Returns:
            List of overlap records, one per qualifying unordered pair
        """
        pass

    def build_overlap(self, first: Assignment, second: Assignment) -> Optional[Overlap]:
        """
        Return the overlap record for two assignments, or None if they do not qualify.

        A pair qualifies when the intervals intersect under the strict test. Two
        assignments of the same employee (two stints on one project) never
        qualify: an employee is not paired with themselves.
        """
        if first.employee_id == second.employee_id:
            return None
        if not first.overlaps(second):
            return None

        overlap = Overlap.between(first, second)
        if overlap.overlap_days == 0 and not self.keep_zero_day_overlaps:
            logger.debug(f"Dropping zero-day overlap between {first} and {second}")
            return None
        return overlap

    def find_all(
        self,
        groups: Dict[int, List[Assignment]],
        n_jobs: int = 1,
        backend: Optional[str] = None,
    ) -> List[Overlap]:
        """
        Find overlaps in all project groups and merge them.

        Args:
            groups: Dictionary mapping project IDs to their assignments
            n_jobs: Number of parallel jobs (1 runs in-process, -1 uses all cores)
            backend: joblib backend name, None for joblib's default

        Returns:
            List of all overlap records in a deterministic order
        """
        snapshots = [
            tuple(members) for _, members in sorted(groups.items()) if len(members) > 1
        ]
        if not snapshots:
            logger.info("No project has more than one assignment.")
            return []

        logger.info(
            f"Searching {len(snapshots)} projects for overlaps "
            f"with {type(self).__name__} (n_jobs={n_jobs})..."
        )

        if n_jobs == 1:
            per_group = [self.find_in_group(snapshot) for snapshot in snapshots]
        else:
            per_group = Parallel(n_jobs=n_jobs, backend=backend)(
                delayed(self.find_in_group)(snapshot) for snapshot in snapshots
            )

        merged = [overlap for overlaps in per_group for overlap in overlaps]
        logger.info(f"Found {len(merged)} overlap records.")
        return sort_overlaps(merged)

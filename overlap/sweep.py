"""
Sweep-line overlap finder for large project teams.
"""
import heapq
from datetime import date
from typing import List, Sequence, Tuple
from models import Assignment, Overlap
from overlap.interfaces import OverlapFinder
from utils.logger import logger


class SweepLineOverlapFinder(OverlapFinder):
    """
    Overlap finder that walks assignments in start-date order.

    Assignments still running are kept in a min-heap keyed on their end date.
    Before an assignment is processed, every active one that ended on or before
    its start is evicted; since starts only grow, an evicted assignment cannot
    overlap anything later. Only the survivors are compared, so the cost is
    O(N log N + K) for K overlapping pairs.
    """

    def find_in_group(self, members: Sequence[Assignment]) -> List[Overlap]:
        ordered = sorted(enumerate(members), key=lambda item: (item[1].date_from, item[0]))
        active: List[Tuple[date, int, Assignment]] = []
        overlaps = []

        for seq, current in ordered:
            while active and active[0][0] <= current.date_from:
                heapq.heappop(active)

            for _, _, other in active:
                # The full strict test still applies for zero-length assignments
                overlap = self.build_overlap(other, current)
                if overlap is not None:
                    overlaps.append(overlap)

            heapq.heappush(active, (current.date_to, seq, current))

        if members:
            logger.debug(
                f"Project {members[0].project_id}: {len(overlaps)} overlaps "
                f"among {len(members)} assignments."
            )
        return overlaps

"""
All-pairs overlap finder.
"""
from typing import List, Sequence
from models import Assignment, Overlap
from overlap.interfaces import OverlapFinder


class PairwiseOverlapFinder(OverlapFinder):
    """
    Compare every assignment of a project with every later one.

    Quadratic in the team size, which is fine for the small teams typical of
    project data.
    """

    def find_in_group(self, members: Sequence[Assignment]) -> List[Overlap]:
        snapshot = tuple(members)
        overlaps = []

        for i in range(len(snapshot) - 1):
            first = snapshot[i]
            for j in range(i + 1, len(snapshot)):
                overlap = self.build_overlap(first, snapshot[j])
                if overlap is not None:
                    overlaps.append(overlap)

        return overlaps

"""
Core data models for the employee overlap analysis.
"""
from dataclasses import dataclass, field
from typing import Tuple
from datetime import date


@dataclass(frozen=True)
class Assignment:
    """One employee's tenure on one project."""

    employee_id: int
    project_id: int
    date_from: date
    date_to: date

    def __repr__(self) -> str:
        """Compact string representation for debugging."""
        return (
            f"Assignment(emp={self.employee_id}, project={self.project_id}, "
            f"{self.date_from.isoformat()}..{self.date_to.isoformat()})"
        )

    @property
    def duration_days(self) -> int:
        return (self.date_to - self.date_from).days

    def overlaps(self, other: "Assignment") -> bool:
        """Check if both intervals intersect. Touching intervals do not count."""
        return self.date_from < other.date_to and other.date_from < self.date_to

    def overlap_days(self, other: "Assignment") -> int:
        """Compute the number of days both intervals have in common."""
        start = max(self.date_from, other.date_from)
        end = min(self.date_to, other.date_to)
        return max(0, (end - start).days)


@dataclass(frozen=True)
class Overlap:
    """Days two employees spent together on a shared project."""

    employee_1_id: int
    employee_2_id: int
    project_id: int
    overlap_days: int

    def __post_init__(self):
        if self.overlap_days < 0:
            raise ValueError(
                f"Overlap days must not be negative, got {self.overlap_days}"
            )
        # Store the pair in ascending order so (A, B) and (B, A) are equal
        if self.employee_1_id > self.employee_2_id:
            low, high = self.employee_2_id, self.employee_1_id
            object.__setattr__(self, "employee_1_id", low)
            object.__setattr__(self, "employee_2_id", high)

    @classmethod
    def between(cls, first: Assignment, second: Assignment) -> "Overlap":
        """Build the overlap record of two assignments on the same project."""
        return cls(
            employee_1_id=first.employee_id,
            employee_2_id=second.employee_id,
            project_id=first.project_id,
            overlap_days=first.overlap_days(second),
        )

    @property
    def pair(self) -> Tuple[int, int]:
        return self.employee_1_id, self.employee_2_id

    def involves(self, employee_a: int, employee_b: int) -> bool:
        """Check if this record belongs to the given pair, in either order."""
        return self.pair == tuple(sorted((employee_a, employee_b)))

    def as_row(self) -> Tuple[int, int, int, int]:
        return (
            self.employee_1_id,
            self.employee_2_id,
            self.project_id,
            self.overlap_days,
        )


@dataclass(frozen=True)
class CollaborationResult:
    """The employee pair that worked together the longest, with per-project detail."""

    employee_1_id: int
    employee_2_id: int
    overlap_days: int
    total_days: int
    projects: Tuple[Overlap, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        return (
            f"CollaborationResult(pair=({self.employee_1_id}, {self.employee_2_id}), "
            f"days={self.overlap_days}, total={self.total_days}, "
            f"projects={[o.project_id for o in self.projects]})"
        )

    @property
    def pair(self) -> Tuple[int, int]:
        return self.employee_1_id, self.employee_2_id

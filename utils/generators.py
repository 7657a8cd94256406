"""
Utility functions for generating synthetic assignment data.
"""
import csv
import os
import random
from typing import Any, Dict, List, Optional
from datetime import date, timedelta
from faker import Faker
from models import Assignment
from utils.logger import logger


class DataGenerator:
    """Generator for test data: employees rotating through projects."""

    def __init__(self, seed: int = 42, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the generator with a specific seed and optional configuration.

        Args:
            seed: Random seed for reproducibility
            config: Optional configuration settings
        """
        self.seed = seed
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.rng = random.Random(seed)

        # Configuration for data generation
        self.config = config or {
            "history_start": date(2015, 1, 1),
            "reference_date": date(2023, 12, 31),
            "assignment_days_min": 14,
            "assignment_days_max": 720,
            "open_end_ratio": 0.1,  # 10% of assignments are still running
            "first_employee_id": 100,
            "first_project_id": 1,
            "date_formats": ["%Y-%m-%d", "%Y.%m.%d", "%Y/%m/%d", "%Y%m%d"],
        }

    def generate_assignments(
        self,
        num_employees: int,
        num_projects: int,
        assignments_per_employee: int = 3,
    ) -> List[Assignment]:
        """
        Generate assignments for a group of employees.

        Each employee works on several projects, with random start dates and
        durations. Some assignments end on the reference date, meaning they are
        still running.

        Args:
            num_employees: Number of employees
            num_projects: Number of projects to spread them over
            assignments_per_employee: Maximum assignments per employee

        Returns:
            List[Assignment]: Generated assignments
        """
        start = self.config["history_start"]
        reference = self.config["reference_date"]
        project_ids = [self.config["first_project_id"] + i for i in range(num_projects)]
        assignments = []

        for i in range(num_employees):
            employee_id = self.config["first_employee_id"] + i
            count = self.fake.random_int(min=1, max=assignments_per_employee)
            projects = self.rng.sample(project_ids, min(count, len(project_ids)))

            for project_id in projects:
                date_from = self.fake.date_between_dates(
                    date_start=start, date_end=reference - timedelta(days=1)
                )
                if self.rng.random() < self.config["open_end_ratio"]:
                    date_to = reference
                else:
                    length = self.fake.random_int(
                        min=self.config["assignment_days_min"],
                        max=self.config["assignment_days_max"],
                    )
                    date_to = min(reference, date_from + timedelta(days=length))

                assignment = Assignment(employee_id, project_id, date_from, date_to)
                assignments.append(assignment)
                logger.debug(f"Created assignment: {assignment}")

        logger.info(
            f"Generated {len(assignments)} assignments for {num_employees} employees "
            f"over {num_projects} projects."
        )
        return assignments

    def write_csv(self, assignments: List[Assignment], filename: str) -> str:
        """
        Write assignments in the raw export format.

        Dates are written in a randomly chosen format per cell, and assignments
        ending on the reference date are written with a "null" end date.

        Args:
            assignments: Assignments to write
            filename: Output path

        Returns:
            str: The path written
        """
        reference = self.config["reference_date"]
        formats = self.config["date_formats"]

        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filename, "w", newline="") as f:
            writer = csv.writer(f)
            for a in assignments:
                date_to = (
                    "null"
                    if a.date_to == reference
                    else a.date_to.strftime(self.rng.choice(formats))
                )
                writer.writerow(
                    [
                        a.employee_id,
                        a.project_id,
                        a.date_from.strftime(self.rng.choice(formats)),
                        date_to,
                    ]
                )

        logger.info(f"Wrote {len(assignments)} assignments to {filename}")
        return filename

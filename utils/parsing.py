"""
Reading assignment records from delimited text files.
"""
import pandas as pd
from datetime import date, datetime
from typing import List, Optional, Sequence
from models import Assignment
from config import ParserConfig
from utils.logger import logger

COLUMNS = ["employee_id", "project_id", "date_from", "date_to"]


class AssignmentParseError(ValueError):
    """Raised when a row of the assignment file cannot be parsed."""

    def __init__(self, row_number: int, message: str):
        self.row_number = row_number
        super().__init__(f"Row {row_number}: {message}")


def parse_date(text: str, formats: Sequence[str]) -> date:
    """
    Parse a date written in any of the given strptime formats.

    Args:
        text: Date string
        formats: Candidate formats, tried in order

    Returns:
        date: The parsed calendar date
    """
    value = text.strip()
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date '{text}'")


def resolve_reference_date(config: ParserConfig, today: Optional[date] = None) -> date:
    """Return the date used for open end dates: the configured one, else today."""
    if config.reference_date:
        return parse_date(config.reference_date, config.date_formats)
    return today or date.today()


def _is_missing(value) -> bool:
    """Check for a cell pandas padded because the row was short."""
    return value is None or (not isinstance(value, str) and pd.isna(value))


def parse_assignment_row(
    values: Sequence[str],
    config: ParserConfig,
    reference_date: date,
    row_number: int = 0,
) -> Assignment:
    """
    Turn one row of raw strings into an Assignment.

    An end date matching one of the configured null tokens is replaced by the
    reference date. A missing cell is an error, not an open end date.
    """
    if len(values) != len(COLUMNS) or any(_is_missing(v) for v in values):
        raise AssignmentParseError(
            row_number, f"expected {len(COLUMNS)} columns, got {list(values)}"
        )

    emp_raw, project_raw, from_raw, to_raw = values
    try:
        employee_id = int(str(emp_raw).strip())
        project_id = int(str(project_raw).strip())
    except ValueError:
        raise AssignmentParseError(
            row_number, f"invalid employee/project id '{emp_raw}', '{project_raw}'"
        ) from None

    try:
        date_from = parse_date(str(from_raw), config.date_formats)
        if str(to_raw).strip() in config.null_tokens:
            date_to = reference_date
        else:
            date_to = parse_date(str(to_raw), config.date_formats)
    except ValueError as e:
        raise AssignmentParseError(row_number, str(e)) from None

    return Assignment(employee_id, project_id, date_from, date_to)


def _looks_like_header(first_row: Sequence[str]) -> bool:
    try:
        int(str(first_row[0]).strip())
        return False
    except ValueError:
        return True


def load_assignments(
    path: str,
    config: Optional[ParserConfig] = None,
    reference_date: Optional[date] = None,
) -> List[Assignment]:
    """
    Load assignments from a delimited file.

    Args:
        path: Path to the CSV file
        config: Parser configuration (defaults are used if omitted)
        reference_date: Date substituted for open end dates

    Returns:
        List[Assignment]: Parsed records in file order
    """
    config = config or ParserConfig()
    reference_date = reference_date or resolve_reference_date(config)

    try:
        df = pd.read_csv(
            path,
            sep=config.delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"Assignment file {path} is empty.")
        return []
    except pd.errors.ParserError as e:
        raise AssignmentParseError(0, f"malformed file {path}: {e}") from None

    rows = df.values.tolist()
    has_header = config.has_header
    if has_header is None:
        has_header = bool(rows) and _looks_like_header(rows[0])
    if has_header:
        logger.debug(f"Skipping header row: {rows[0]}")
        rows = rows[1:]

    offset = 2 if has_header else 1
    assignments = [
        parse_assignment_row(row, config, reference_date, row_number=i + offset)
        for i, row in enumerate(rows)
    ]

    logger.info(
        f"Loaded {len(assignments)} assignments from {path} "
        f"(open end dates resolved to {reference_date.isoformat()})."
    )
    return assignments

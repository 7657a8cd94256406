"""
Locating assignment files and letting the user pick one.
"""
import os
from typing import Callable, List
from utils.logger import logger


def find_csv_files(directory: str) -> List[str]:
    """Return the names of all CSV files in a directory, sorted."""
    if not os.path.isdir(directory):
        logger.warning(f"Data directory not found: {directory}")
        return []
    return sorted(
        name
        for name in os.listdir(directory)
        if name.lower().endswith(".csv") and os.path.isfile(os.path.join(directory, name))
    )


def choose_file(
    files: List[str],
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> str:
    """
    Ask the user to choose one of the given files.

    Args:
        files: File names to offer
        input_fn: Function reading the user's answer
        output_fn: Function displaying the menu

    Returns:
        str: The chosen file name
    """
    if not files:
        raise FileNotFoundError("No CSV files available to choose from.")

    output_fn("Choose a file to load (enter the file number):")
    for i, name in enumerate(files, start=1):
        output_fn(f"{i}. {name}")

    while True:
        answer = input_fn("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(files):
            chosen = files[int(answer) - 1]
            output_fn(f"You chose: {chosen}")
            return chosen
        output_fn(f"Please enter a number between 1 and {len(files)}.")

"""
Logging configuration for the overlap analysis.

Everything logs through the "team_overlap" logger. Console output goes to
stdout; a run can additionally be mirrored to a log file.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def setup_logger(
    name: str = "team_overlap",
    level: int = logging.INFO,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up and configure a logger.

    Calling it again updates the level of the existing handlers instead of
    adding new ones, so the CLI can change verbosity after modules have
    imported the default logger.

    Args:
        name: Logger name
        level: Logging level for the logger and all its handlers
        log_file: Optional path of a file that receives the same records

    Returns:
        logging.Logger: The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file and not _has_file_handler(logger, log_file):
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


# Default logger for the application
logger = setup_logger()

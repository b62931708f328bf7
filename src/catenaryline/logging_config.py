"""
Logging Configuration
Sets up the 'catenaryline' logger used by the solvers and the command-line tool.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'catenaryline' namespace.

    Log records go to stderr so that point data written to stdout stays clean.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    package_logger = logging.getLogger("catenaryline")
    package_logger.setLevel(level)

    # repeated setup (tests, repeated CLI calls) must not stack handlers
    if package_logger.hasHandlers():
        package_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")


def level_from_verbosity(verbosity: int) -> int:
    """Map a count of -v flags to a logging level (0: WARNING, 1: INFO, 2+: DEBUG)."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG

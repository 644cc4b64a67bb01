"""
Logging setup for the ``stat_functions`` namespace.
"""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the ``stat_functions`` logger.

    Parameters
    ----------
    level : int, optional
        Logging level, by default ``logging.INFO``
    log_file : str, optional
        Path of a file to write logs to as well as stdout
    """
    logger = logging.getLogger("stat_functions")
    logger.setLevel(level)

    # Repeated setup must not stack handlers or leave their files open
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")

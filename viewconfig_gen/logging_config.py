"""Logging configuration for viewconfig_gen.

Console output goes through rich; an optional log file receives plain
formatted records.
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "viewconfig_gen"
LOG_LEVEL_ENV = "VIEWCONFIG_GEN_LOG_LEVEL"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure logging for the package.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the VIEWCONFIG_GEN_LOG_LEVEL environment variable.
        log_file: Optional file path for log output.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance under the package namespace.
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)

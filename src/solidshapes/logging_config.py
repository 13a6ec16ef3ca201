"""
Logging Configuration
Routes the 'solidshapes' loggers to the console (and optionally a file).

Library modules only create loggers and emit DEBUG records; nothing is shown
until an application, such as the demo in ``__main__``, calls ``setup_logging``.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "solidshapes"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the package logger used by the shapes, calculators
    and connections.

    Args:
        level: Threshold for both handlers. The demo uses logging.INFO;
            pass logging.DEBUG to see shape registration and calculator
            construction.
        log_file: Optional path; the file is overwritten on each call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling twice replaces the handlers instead of duplicating every line
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")

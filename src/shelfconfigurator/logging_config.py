"""
Logging Configuration
=====================
Sets up the 'shelfconfigurator' logger once at startup.

Why is this file needed?
------------------------
1. Every module logs through ``logging.getLogger(__name__)``; this is the one
   place that decides where those records go.
2. The 3D preview pulls in pyvista, whose own loggers are chatty at INFO.
   They are held at WARNING so placement and import messages stay readable.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "shelfconfigurator"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"
QUIET_LOGGERS = ("pyvista", "pyvistaqt")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package's records to stdout and, optionally, to a file.

    Calling it again replaces the previous handlers instead of stacking them.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Session log path; the file is overwritten on each launch.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.info(f"Logging initialized (level {logging.getLevelName(level)}).")
    return logger

"""
Logging setup for the metrics engine.

Modules log through ``logging.getLogger(__name__)``; the host application
calls ``setup_logging()`` once to attach a console handler to the package
logger.
"""
import logging
import sys

from crm_metrics.core.config import get_settings

PACKAGE_LOGGER = "crm_metrics"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        level: Logging level name. Defaults to settings.LOG_LEVEL.

    Returns:
        The ``crm_metrics`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = (level or get_settings().LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger

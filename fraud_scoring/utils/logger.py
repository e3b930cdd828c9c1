"""
Logging configuration for the fraud scoring engine.

All modules log through children of the 'fraud_scoring' logger so the
level and format are set in one place.
"""

import logging
import sys
from typing import Optional

from ..config import settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to 'fraud_scoring')

    Returns:
        Configured logger instance
    """
    logger_name = name or "fraud_scoring"
    logger = logging.getLogger(logger_name)

    if not logger.handlers and "." not in logger_name:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.app_log_level)

    return logger


# Default logger instance
logger = get_logger()

# Utilities
from .logger import get_logger, logger

__all__ = ["get_logger", "logger"]

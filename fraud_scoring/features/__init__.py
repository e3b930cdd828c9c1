# Feature Module
from .statistics import (
    LOCAL_TIMEZONE,
    compute_statistics,
    hour_of_day,
    most_common,
    validate_timezone,
)

__all__ = [
    "LOCAL_TIMEZONE",
    "compute_statistics",
    "hour_of_day",
    "most_common",
    "validate_timezone",
]

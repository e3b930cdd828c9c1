"""
User Statistics Aggregation

Reduces a user's transaction history into the behavioral baseline
the detectors compare new transactions against:
- Average and maximum amount
- Most common locations, merchant categories and devices (top 3)
- Hour of day of every historical transaction

"Most common" ranking is count descending, ties broken by the order
in which values first appear in history.
"""

from datetime import datetime, UTC
from typing import Hashable, Iterable, TypeVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..schemas import UserHistory, UserStatistics


T = TypeVar("T", bound=Hashable)

COMMON_VALUES_LIMIT = 3
LOCAL_TIMEZONE = "local"
UTC_TIMEZONE = "UTC"


def most_common(values: Iterable[T], limit: int = COMMON_VALUES_LIMIT) -> list[T]:
    """
    Rank values by frequency.

    Args:
        values: Observed values, in history order
        limit: Maximum number of values to return

    Returns:
        Up to `limit` values, most frequent first; equal counts keep
        first-seen order
    """
    counts: dict[T, int] = {}
    first_seen: dict[T, int] = {}

    for index, value in enumerate(values):
        if value not in counts:
            counts[value] = 0
            first_seen[value] = index
        counts[value] += 1

    ranked = sorted(counts, key=lambda value: (-counts[value], first_seen[value]))
    return ranked[:limit]


def validate_timezone(timezone: str) -> str:
    """
    Check that an hour-of-day timezone name can be resolved.

    Args:
        timezone: 'local', 'UTC', or an IANA zone name

    Returns:
        The name, unchanged

    Raises:
        ValueError: If the name is not a known IANA zone
    """
    if timezone.lower() == LOCAL_TIMEZONE or timezone.upper() == UTC_TIMEZONE:
        return timezone
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone {timezone!r}") from e
    return timezone


def hour_of_day(timestamp: datetime, timezone: str = LOCAL_TIMEZONE) -> int:
    """
    Civil hour (0-23) of an instant in the configured timezone.

    Args:
        timestamp: Timezone-aware instant
        timezone: 'local' for the host clock, 'UTC', or an IANA zone name
    """
    if timezone.lower() == LOCAL_TIMEZONE:
        return timestamp.astimezone().hour
    if timezone.upper() == UTC_TIMEZONE:
        return timestamp.astimezone(UTC).hour
    return timestamp.astimezone(ZoneInfo(timezone)).hour


def compute_statistics(
    history: UserHistory,
    hour_timezone: str = LOCAL_TIMEZONE,
) -> UserStatistics:
    """
    Build the baseline profile for a user.

    Args:
        history: Prior transactions, oldest first
        hour_timezone: Timezone used for hour-of-day extraction

    Returns:
        UserStatistics (all zero/empty for an empty history)
    """
    if not history:
        return UserStatistics()

    amounts = [txn.amount for txn in history]

    return UserStatistics(
        avg_amount=sum(amounts) / len(amounts),
        max_amount=max(amounts),
        common_locations=most_common(txn.resolved_location for txn in history),
        common_merchants=most_common(txn.merchant_category for txn in history),
        common_devices=most_common(txn.device_id for txn in history),
        transaction_hours=tuple(hour_of_day(txn.timestamp, hour_timezone) for txn in history),
    )

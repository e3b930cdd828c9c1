"""
Velocity Detection

Detects bursts of transactions from the same user:
1. Stolen credentials being used rapidly before a block
2. Automated purchasing

Windows are rolling and end at the transaction's own timestamp:
a prior transaction counts when window_start <= t < transaction time.

Hourly thresholds are checked before daily ones, so a moderate hourly
burst (0.6) wins over a heavy daily one (0.8). Precedence is by check
order, not by magnitude.
"""

from datetime import timedelta

from ..config import settings
from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


HOURLY_CRITICAL_COUNT = 10
HOURLY_ELEVATED_COUNT = 5
DAILY_CRITICAL_COUNT = 50
DAILY_ELEVATED_COUNT = 30


class VelocityDetector(BaseDetector):
    """
    Detects abnormal transaction frequency.

    Counts prior transactions inside a short (1h) and long (24h)
    window and maps the counts to a score.
    """

    name = "velocity"
    reason = "High transaction velocity detected"

    def __init__(
        self,
        short_window_seconds: int = None,
        long_window_seconds: int = None,
    ):
        """
        Initialize detector.

        Args:
            short_window_seconds: Short window length (defaults to settings)
            long_window_seconds: Long window length (defaults to settings)
        """
        self.short_window = timedelta(
            seconds=short_window_seconds or settings.velocity_window_1h_seconds
        )
        self.long_window = timedelta(
            seconds=long_window_seconds or settings.velocity_window_24h_seconds
        )

    def count_in_window(
        self,
        transaction: Transaction,
        history: UserHistory,
        window: timedelta,
    ) -> int:
        """Number of history entries in [time - window, time)."""
        end = transaction.timestamp
        start = end - window
        return sum(1 for txn in history if start <= txn.timestamp < end)

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        hourly = self.count_in_window(transaction, history, self.short_window)
        daily = self.count_in_window(transaction, history, self.long_window)

        if hourly > HOURLY_CRITICAL_COUNT:
            return 1.0
        if hourly > HOURLY_ELEVATED_COUNT:
            return 0.6
        if daily > DAILY_CRITICAL_COUNT:
            return 0.8
        if daily > DAILY_ELEVATED_COUNT:
            return 0.5

        return 0.0

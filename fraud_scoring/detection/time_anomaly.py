"""
Time Anomaly Detection

Flags transactions in the small hours (02:00-05:59) for users who
have never transacted at that time of day before.
"""

from ..features import LOCAL_TIMEZONE, hour_of_day
from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


UNUSUAL_HOURS = range(2, 6)  # 2 AM - 5 AM inclusive
UNUSUAL_HOUR_SCORE = 0.6


class TimeAnomalyDetector(BaseDetector):
    """
    Detects transactions at unusual hours.

    Hours are read in `hour_timezone`, which must match the timezone
    used to build the baseline's transaction hours.
    """

    name = "time_anomaly"
    reason = "Transaction at unusual time"

    def __init__(self, hour_timezone: str = LOCAL_TIMEZONE):
        """
        Initialize detector.

        Args:
            hour_timezone: 'local', 'UTC', or an IANA zone name
        """
        self.hour_timezone = hour_timezone

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        if not history:
            return 0.0

        hour = hour_of_day(transaction.timestamp, self.hour_timezone)
        if hour not in UNUSUAL_HOURS:
            return 0.0

        if any(h in UNUSUAL_HOURS for h in stats.transaction_hours):
            return 0.0

        return UNUSUAL_HOUR_SCORE

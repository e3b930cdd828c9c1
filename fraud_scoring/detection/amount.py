"""
Amount Anomaly Detection

Compares the transaction amount with the user's average amount:
1. Much larger than usual (possible account takeover / cash-out)
2. Much smaller than usual (possible card testing)
"""

from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


# (ratio strictly above, score), checked in order
HIGH_RATIO_TIERS = (
    (5.0, 1.0),  # 500%+ of average
    (3.0, 0.7),  # 300%+ of average
    (2.0, 0.4),  # 200%+ of average
)
LOW_RATIO_THRESHOLD = 0.1
LOW_RATIO_SCORE = 0.3
HIGH_DEVIATION_SCORE = 0.7


class AmountAnomalyDetector(BaseDetector):
    """Detects amounts far above or far below the user's average."""

    name = "amount_anomaly"

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        if stats.avg_amount == 0:
            # No history
            return 0.0

        ratio = transaction.amount / stats.avg_amount

        for threshold, score in HIGH_RATIO_TIERS:
            if ratio > threshold:
                return score

        if ratio < LOW_RATIO_THRESHOLD:
            return LOW_RATIO_SCORE

        return 0.0

    def describe(self, score: float) -> str:
        level = "high" if score > HIGH_DEVIATION_SCORE else "moderate"
        return f"Unusual transaction amount ({level} deviation)"

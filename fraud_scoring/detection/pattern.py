"""
Pattern Deviation Detection

Composite signal: fires only when a transaction breaks more than one
of the user's established norms at once.

Norms checked:
- Merchant category among the user's common categories
- Amount no more than twice the user's largest past amount
"""

from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


MIN_HISTORY = 5
MAX_AMOUNT_MULTIPLIER = 2
PATTERN_DEVIATION_SCORE = 0.3


class PatternDeviationDetector(BaseDetector):
    """Detects simultaneous departures from merchant and amount norms."""

    name = "pattern_deviation"
    reason = "Unusual transaction pattern"

    def __init__(self, min_history: int = MIN_HISTORY):
        """
        Initialize detector.

        Args:
            min_history: Minimum history length before norms are trusted
        """
        self.min_history = min_history

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        if len(history) < self.min_history:
            return 0.0

        deviations = 0
        if transaction.merchant_category not in stats.common_merchants:
            deviations += 1
        if transaction.amount > stats.max_amount * MAX_AMOUNT_MULTIPLIER:
            deviations += 1

        return PATTERN_DEVIATION_SCORE if deviations > 1 else 0.0

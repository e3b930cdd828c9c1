"""
Merchant Risk Detection

Static category lookup; independent of the user's history.
"""

from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


# High-risk merchant categories (exact, case-sensitive match)
HIGH_RISK_CATEGORIES = frozenset({
    "Gambling",
    "Cryptocurrency",
    "Adult Content",
    "Peer-to-Peer",
})

HIGH_RISK_SCORE = 0.7


class MerchantRiskDetector(BaseDetector):
    """Detects transactions with high-risk merchant categories."""

    name = "merchant_risk"
    reason = "High-risk merchant category"

    def __init__(self, high_risk_categories: frozenset[str] = None):
        """
        Initialize detector.

        Args:
            high_risk_categories: Category names to flag
        """
        self.high_risk_categories = high_risk_categories or HIGH_RISK_CATEGORIES

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        if transaction.merchant_category in self.high_risk_categories:
            return HIGH_RISK_SCORE
        return 0.0

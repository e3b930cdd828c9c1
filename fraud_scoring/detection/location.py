"""
Location Mismatch Detection

Flags transactions from places the user does not usually transact
from. A location seen among the last few transactions is treated as
less suspicious than one never seen recently.
"""

from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


RECENT_TRANSACTIONS = 10
RECENT_LOCATION_SCORE = 0.4
NEW_LOCATION_SCORE = 0.8


class LocationMismatchDetector(BaseDetector):
    """Detects transactions outside the user's common locations."""

    name = "location_mismatch"
    reason = "Transaction from unusual location"

    def __init__(self, recent_transactions: int = RECENT_TRANSACTIONS):
        """
        Initialize detector.

        Args:
            recent_transactions: Size of the recent-history window (at least 1)

        Raises:
            ValueError: If the window is empty
        """
        if recent_transactions < 1:
            raise ValueError(
                f"recent_transactions must be at least 1 (got {recent_transactions})"
            )
        self.recent_transactions = recent_transactions

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        if not history:
            return 0.0

        location = transaction.resolved_location
        if location in stats.common_locations:
            return 0.0

        # History is oldest first, so the tail is the most recent activity
        recent = history[-self.recent_transactions:]
        if any(txn.resolved_location == location for txn in recent):
            return RECENT_LOCATION_SCORE

        return NEW_LOCATION_SCORE

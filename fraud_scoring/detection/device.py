"""
Device Change Detection
"""

from ..schemas import Transaction, UserHistory, UserStatistics
from .detector import BaseDetector


NEW_DEVICE_SCORE = 0.5


class DeviceChangeDetector(BaseDetector):
    """Detects a device outside the user's most common devices."""

    name = "device_change"
    reason = "Transaction from different device"

    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        if not history or not transaction.device_id:
            return 0.0

        if transaction.device_id not in stats.common_devices:
            return NEW_DEVICE_SCORE

        return 0.0

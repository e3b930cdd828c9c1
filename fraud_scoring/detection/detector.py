"""
Detector Base

Every risk factor is a small, pure detector: it looks at the new
transaction together with the user's history and baseline, and
returns a normalized score in [0, 1]. A score of 0 means "no signal";
any positive score carries one human-readable reason.

Detectors hold no mutable state, so one instance can serve any number
of concurrent scoring calls.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..schemas import Transaction, UserHistory, UserStatistics


@dataclass(frozen=True)
class DetectionResult:
    """
    Result from a detector.

    Contains the score and, when triggered, the reason for explainability.
    """
    score: float = 0.0  # 0.0 to 1.0
    reason: Optional[str] = None

    @property
    def triggered(self) -> bool:
        return self.score > 0


class BaseDetector(ABC):
    """
    Base class for all risk factor detectors.

    Subclasses implement `evaluate` (the raw rule) and set `name` and
    `reason`; detectors whose reason depends on the score override
    `describe`.
    """

    name: str = "detector"
    reason: str = ""

    def detect(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> DetectionResult:
        """
        Run detection logic.

        Args:
            transaction: Transaction being scored
            history: Prior transactions of the same user, oldest first
            stats: Baseline computed from `history`

        Returns:
            DetectionResult with score and reason
        """
        score = self.evaluate(transaction, history, stats)
        if score <= 0:
            return DetectionResult()
        return DetectionResult(score=score, reason=self.describe(score))

    def describe(self, score: float) -> str:
        """Reason text for a positive score."""
        return self.reason

    @abstractmethod
    def evaluate(
        self,
        transaction: Transaction,
        history: UserHistory,
        stats: UserStatistics,
    ) -> float:
        """Return the raw detector score (0.0 to 1.0)."""

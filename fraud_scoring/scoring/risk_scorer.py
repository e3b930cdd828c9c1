"""
Risk Scoring Engine

Combines the seven risk factor detectors into a single assessment.

Produces:
- Risk score (0 to 100, 2 decimals)
- Classification (Safe / Suspicious / Fraudulent)
- Ordered reasons (one per triggered detector, in table order)

The factor table is fixed and evaluated in order:

    detector            weight
    amount_anomaly      0.25
    velocity            0.20
    location_mismatch   0.15
    time_anomaly        0.15
    device_change       0.10
    merchant_risk       0.10
    pattern_deviation   0.05

A user's first transaction can only trigger merchant risk, so it
scores at most 7 and is always Safe.
"""

from functools import lru_cache
from typing import NamedTuple, Optional

from ..features import compute_statistics
from ..schemas import (
    Classification,
    FraudAssessment,
    NO_SUSPICIOUS_PATTERNS,
    Transaction,
    UserHistory,
)
from ..detection import (
    AmountAnomalyDetector,
    BaseDetector,
    DetectionResult,
    DeviceChangeDetector,
    LocationMismatchDetector,
    MerchantRiskDetector,
    PatternDeviationDetector,
    TimeAnomalyDetector,
    VelocityDetector,
)
from ..utils import get_logger
from .policy import ScoringPolicy, get_default_policy

logger = get_logger("fraud_scoring.scoring")

MAX_SCORE = 100.0


class RiskFactor(NamedTuple):
    """One row of the factor table: a detector and its weight."""
    detector: BaseDetector
    weight: float


def classify(score: float, policy: ScoringPolicy) -> Classification:
    """
    Map a score to a classification.

    Args:
        score: Risk score (0 to 100)
        policy: Policy holding the thresholds

    Returns:
        Classification for the score
    """
    if score >= policy.fraudulent_threshold:
        return Classification.FRAUDULENT
    if score >= policy.suspicious_threshold:
        return Classification.SUSPICIOUS
    return Classification.SAFE


class RiskScorer:
    """
    Main risk scoring engine.

    Holds an immutable factor table built from a ScoringPolicy. Safe to
    share across threads: scoring touches no mutable state.
    """

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        """
        Initialize risk scorer with all detectors.

        Args:
            policy: Scoring policy (if None, uses the settings-derived default)
        """
        self.policy = policy or get_default_policy()

        detectors: tuple[BaseDetector, ...] = (
            AmountAnomalyDetector(),
            VelocityDetector(),
            LocationMismatchDetector(),
            TimeAnomalyDetector(hour_timezone=self.policy.hour_timezone),
            DeviceChangeDetector(),
            MerchantRiskDetector(),
            PatternDeviationDetector(),
        )
        self.factors: tuple[RiskFactor, ...] = tuple(
            RiskFactor(detector, self.policy.weights.weight_for(detector.name))
            for detector in detectors
        )

    def assess(
        self,
        transaction: Transaction,
        history: UserHistory = (),
    ) -> FraudAssessment:
        """
        Score a transaction against the user's history.

        Args:
            transaction: Transaction being scored
            history: Prior transactions of the same user, oldest first,
                excluding `transaction` itself

        Returns:
            FraudAssessment with score, classification and reasons
        """
        stats = compute_statistics(history, self.policy.hour_timezone)

        results: list[tuple[RiskFactor, DetectionResult]] = [
            (factor, factor.detector.detect(transaction, history, stats))
            for factor in self.factors
        ]
        fired = [(factor, result) for factor, result in results if result.triggered]

        total = sum(result.score * factor.weight * 100 for factor, result in fired)
        score = round(min(MAX_SCORE, max(0.0, total)), 2)
        classification = classify(score, self.policy)

        assessment = FraudAssessment(
            score=score,
            classification=classification,
            reasons=tuple(result.reason for _, result in fired) or (NO_SUSPICIOUS_PATTERNS,),
            signals={factor.detector.name: result.score for factor, result in results},
        )

        logger.debug(
            "Scored transaction %s for user %s: %.2f (%s)",
            transaction.transaction_id,
            transaction.user_id,
            assessment.score,
            assessment.classification.value,
        )
        return assessment


@lru_cache
def get_default_scorer() -> RiskScorer:
    """Get the process-wide scorer built from the default policy."""
    return RiskScorer()


def analyze_fraud_risk(
    transaction: Transaction,
    history: UserHistory = (),
    scorer: Optional[RiskScorer] = None,
) -> FraudAssessment:
    """
    Score a transaction with the given (or default) scorer.

    Args:
        transaction: Transaction being scored
        history: Prior transactions of the same user, oldest first
        scorer: Scorer to use (defaults to the process-wide scorer)

    Returns:
        FraudAssessment
    """
    return (scorer or get_default_scorer()).assess(transaction, history)

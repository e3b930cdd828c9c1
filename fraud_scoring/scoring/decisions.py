"""
Decision Helpers

Glue between the scoring engine and its collaborators:
- Resulting transaction status for a classification
- Whether the notifier should raise an alert
- Decision and override audit log entries

Overrides change the operational status only. The original
FraudAssessment is carried over untouched so the automated decision
stays auditable.
"""

from datetime import datetime, UTC
from typing import Optional
from uuid import uuid4

from ..schemas import (
    Classification,
    DecisionLogEntry,
    FraudAssessment,
    OverrideAction,
    OverrideLogEntry,
    ScoredTransaction,
    Transaction,
    TransactionStatus,
    UserHistory,
)
from ..utils import get_logger
from .risk_scorer import RiskScorer, analyze_fraud_risk

logger = get_logger("fraud_scoring.decisions")


CLASSIFICATION_ACTIONS = {
    Classification.FRAUDULENT: TransactionStatus.BLOCKED,
    Classification.SUSPICIOUS: TransactionStatus.FLAGGED,
    Classification.SAFE: TransactionStatus.APPROVED,
}

OVERRIDE_STATUSES = {
    OverrideAction.ADMIN_APPROVE: TransactionStatus.APPROVED,
    OverrideAction.ADMIN_BLOCK: TransactionStatus.BLOCKED,
}

ALERT_CLASSIFICATIONS = frozenset({
    Classification.FRAUDULENT,
    Classification.SUSPICIOUS,
})


def action_for(classification: Classification) -> TransactionStatus:
    """Resulting status for a classification."""
    return CLASSIFICATION_ACTIONS[classification]


def should_alert(assessment: Optional[FraudAssessment]) -> bool:
    """True when the notifier should push a fraud alert."""
    return assessment is not None and assessment.classification in ALERT_CLASSIFICATIONS


def score_transaction(
    transaction: Transaction,
    history: UserHistory = (),
    scorer: Optional[RiskScorer] = None,
) -> ScoredTransaction:
    """
    Score a transaction and attach the result.

    Args:
        transaction: Transaction being scored
        history: Prior transactions of the same user, oldest first
        scorer: Scorer to use (defaults to the process-wide scorer)

    Returns:
        ScoredTransaction with assessment and resulting status
    """
    assessment = analyze_fraud_risk(transaction, history, scorer)
    return ScoredTransaction(
        transaction=transaction,
        fraud_status=assessment,
        status=action_for(assessment.classification),
    )


def build_decision_log(scored: ScoredTransaction) -> DecisionLogEntry:
    """
    Build the audit entry for an automated decision.

    Raises:
        ValueError: If the transaction has not been scored
    """
    assessment = scored.fraud_status
    if assessment is None:
        raise ValueError(
            f"Transaction {scored.transaction.transaction_id} has no assessment"
        )

    return DecisionLogEntry(
        log_id=str(uuid4()),
        transaction_id=scored.transaction.transaction_id,
        user_id=scored.transaction.user_id,
        risk_score=assessment.score,
        classification=assessment.classification,
        reasons=assessment.reasons,
        action=scored.status,
    )


def apply_override(
    scored: ScoredTransaction,
    action: OverrideAction,
    admin_id: str,
    notes: Optional[str] = None,
) -> tuple[ScoredTransaction, OverrideLogEntry]:
    """
    Apply a manual admin decision to a scored transaction.

    Args:
        scored: Transaction as persisted
        action: Approve or block
        admin_id: Administrator performing the override
        notes: Free-text justification

    Returns:
        Tuple of (updated transaction, override log entry)
    """
    now = datetime.now(UTC)
    updated = scored.model_copy(update={
        "status": OVERRIDE_STATUSES[action],
        "admin_override": True,
        "admin_notes": notes,
        "updated_by": admin_id,
        "updated_at": now,
    })

    entry = OverrideLogEntry(
        log_id=str(uuid4()),
        transaction_id=scored.transaction.transaction_id,
        user_id=scored.transaction.user_id,
        action=action,
        admin_id=admin_id,
        notes=notes,
        timestamp=now,
    )

    logger.info(
        "Admin %s applied %s to transaction %s (was %s)",
        admin_id,
        action.value,
        scored.transaction.transaction_id,
        scored.status.value,
    )
    return updated, entry

"""
Assessment Schemas

Defines the scoring output and the records built around it:
- FraudAssessment: score, classification and reasons for one transaction
- ScoredTransaction: a transaction with its assessment and resulting status
- DecisionLogEntry / OverrideLogEntry: append-only audit trail records

Classification follows a fixed hierarchy:
Safe < Suspicious < Fraudulent
"""

from datetime import datetime, UTC
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .transactions import Transaction


NO_SUSPICIOUS_PATTERNS = "No suspicious patterns detected"


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class Classification(str, Enum):
    """
    Fraud classification outcomes.

    A pure function of the numeric score (see ScoringPolicy thresholds):
    - SAFE: below the suspicious threshold
    - SUSPICIOUS: at or above the suspicious threshold
    - FRAUDULENT: at or above the fraudulent threshold
    """
    SAFE = "Safe"
    SUSPICIOUS = "Suspicious"
    FRAUDULENT = "Fraudulent"


class TransactionStatus(str, Enum):
    """Operational status of a transaction."""
    PENDING = "pending"
    APPROVED = "approved"
    FLAGGED = "flagged"
    BLOCKED = "blocked"


class OverrideAction(str, Enum):
    """Manual actions an administrator can take on a scored transaction."""
    ADMIN_APPROVE = "admin_approve"
    ADMIN_BLOCK = "admin_block"


class FraudAssessment(BaseModel):
    """
    Complete fraud assessment for one transaction.

    Created once per scoring call and never modified afterwards;
    overrides are recorded separately so the original decision
    survives for audit.
    """

    model_config = ConfigDict(frozen=True)

    score: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Risk score, 0-100, rounded to 2 decimals",
    )
    classification: Classification = Field(
        ...,
        description="Classification derived from the score",
    )
    reasons: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Human-readable reasons in detector order",
    )
    signals: Mapping[str, float] = Field(
        default_factory=dict,
        validate_default=True,
        description="Raw detector outputs (0.0 to 1.0) by detector name",
    )
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="When the assessment was made",
    )

    @field_validator("signals", mode="after")
    @classmethod
    def _freeze_signals(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(v))

    @field_serializer("signals")
    def _serialize_signals(self, v: Mapping[str, float]) -> dict[str, float]:
        return dict(v)


class ScoredTransaction(BaseModel):
    """
    A transaction with its attached assessment.

    This is the record persisted by the storage layer and pushed to
    the notifier.
    """
    transaction: Transaction
    fraud_status: Optional[FraudAssessment] = Field(
        default=None,
        description="Assessment attached at scoring time",
    )
    status: TransactionStatus = Field(
        default=TransactionStatus.PENDING,
        description="Operational status (may be overridden by an admin)",
    )
    admin_override: bool = Field(default=False)
    admin_notes: Optional[str] = Field(default=None)
    updated_by: Optional[str] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @property
    def classification(self) -> Optional[Classification]:
        """Classification of the attached assessment, if any."""
        return self.fraud_status.classification if self.fraud_status else None


class DecisionLogEntry(BaseModel):
    """Append-only audit record of an automated scoring decision."""

    model_config = ConfigDict(frozen=True)

    log_id: str
    transaction_id: str
    user_id: str
    risk_score: float
    classification: Classification
    reasons: tuple[str, ...]
    timestamp: datetime = Field(default_factory=_utc_now)
    action: TransactionStatus


class OverrideLogEntry(BaseModel):
    """Append-only audit record of a manual admin override."""

    model_config = ConfigDict(frozen=True)

    log_id: str
    transaction_id: str
    user_id: str
    action: OverrideAction
    admin_id: str
    notes: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utc_now)

# Data schemas for the fraud scoring engine
from .transactions import Transaction, TransactionRequest, UserHistory, UNKNOWN
from .statistics import UserStatistics
from .assessments import (
    Classification,
    TransactionStatus,
    OverrideAction,
    FraudAssessment,
    ScoredTransaction,
    DecisionLogEntry,
    OverrideLogEntry,
    NO_SUSPICIOUS_PATTERNS,
)
from .reports import (
    FraudSummary,
    DateRollup,
    RegionRollup,
    UserRollup,
    VolumeRollup,
    PaymentMethodRollup,
)

__all__ = [
    # Transactions
    "Transaction",
    "TransactionRequest",
    "UserHistory",
    "UNKNOWN",
    # Baseline
    "UserStatistics",
    # Assessments
    "Classification",
    "TransactionStatus",
    "OverrideAction",
    "FraudAssessment",
    "ScoredTransaction",
    "DecisionLogEntry",
    "OverrideLogEntry",
    "NO_SUSPICIOUS_PATTERNS",
    # Reports
    "FraudSummary",
    "DateRollup",
    "RegionRollup",
    "UserRollup",
    "VolumeRollup",
    "PaymentMethodRollup",
]

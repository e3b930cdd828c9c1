# Fraud Scoring Engine
from .schemas import Transaction, TransactionRequest, FraudAssessment, Classification
from .scoring import RiskScorer, ScoringPolicy, analyze_fraud_risk, score_transaction
from .reporting import summarize

__version__ = "1.0.0"

__all__ = [
    "Transaction",
    "TransactionRequest",
    "FraudAssessment",
    "Classification",
    "RiskScorer",
    "ScoringPolicy",
    "analyze_fraud_risk",
    "score_transaction",
    "summarize",
]

# Scoring Module
from .policy import (
    DEFAULT_POLICY,
    RiskWeights,
    ScoringPolicy,
    get_default_policy,
    load_policy,
)
from .risk_scorer import (
    RiskFactor,
    RiskScorer,
    analyze_fraud_risk,
    classify,
    get_default_scorer,
)
from .decisions import (
    action_for,
    apply_override,
    build_decision_log,
    score_transaction,
    should_alert,
)

__all__ = [
    "DEFAULT_POLICY",
    "RiskWeights",
    "ScoringPolicy",
    "get_default_policy",
    "load_policy",
    "RiskFactor",
    "RiskScorer",
    "analyze_fraud_risk",
    "classify",
    "get_default_scorer",
    "action_for",
    "apply_override",
    "build_decision_log",
    "score_transaction",
    "should_alert",
]

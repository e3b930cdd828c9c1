"""
Batch Summary

Counts already-scored transactions by classification and computes
the overall fraud rate. Used by reporting only; the live scoring path
never calls it.
"""

from collections import Counter
from typing import Iterable

from ..schemas import Classification, FraudSummary, ScoredTransaction


def format_rate(part: int, total: int) -> str:
    """part / total as a 2-decimal percentage string, "0" for an empty total."""
    if total == 0:
        return "0"
    return f"{part / total * 100:.2f}"


def summarize(transactions: Iterable[ScoredTransaction]) -> FraudSummary:
    """
    Summarize a batch of scored transactions.

    Transactions without an assessment count toward the total only.

    Args:
        transactions: Scored transactions, in any order

    Returns:
        FraudSummary with counts and fraud rate
    """
    total = 0
    counts: Counter[Classification] = Counter()
    for scored in transactions:
        total += 1
        if scored.classification is not None:
            counts[scored.classification] += 1

    return FraudSummary(
        total=total,
        fraudulent=counts[Classification.FRAUDULENT],
        suspicious=counts[Classification.SUSPICIOUS],
        safe=counts[Classification.SAFE],
        fraud_rate=format_rate(counts[Classification.FRAUDULENT], total),
    )

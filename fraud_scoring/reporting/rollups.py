"""
Reporting Rollups

Grouped views over scored transactions for dashboards:
1. Fraud rate per calendar date
2. Riskiest regions
3. Riskiest users
4. Volume per calendar date
5. Payment method distribution

Dates are UTC calendar dates. Groups are built in first-seen order and
sorted stably, so equal keys keep that order.
"""

from dataclasses import dataclass
from datetime import UTC
from typing import Callable, Sequence

from ..schemas import (
    Classification,
    DateRollup,
    PaymentMethodRollup,
    RegionRollup,
    ScoredTransaction,
    UNKNOWN,
    UserRollup,
    VolumeRollup,
)
from .summary import format_rate


TOP_N = 10


@dataclass
class _Tally:
    total: int = 0
    fraudulent: int = 0
    suspicious: int = 0

    def add(self, scored: ScoredTransaction) -> None:
        self.total += 1
        if scored.classification == Classification.FRAUDULENT:
            self.fraudulent += 1
        elif scored.classification == Classification.SUSPICIOUS:
            self.suspicious += 1


def _utc_date(scored: ScoredTransaction) -> str:
    return scored.transaction.timestamp.astimezone(UTC).date().isoformat()


def _tally_by(
    transactions: Sequence[ScoredTransaction],
    key: Callable[[ScoredTransaction], str],
) -> dict[str, _Tally]:
    tallies: dict[str, _Tally] = {}
    for scored in transactions:
        tallies.setdefault(key(scored), _Tally()).add(scored)
    return tallies


def fraud_rate_by_date(transactions: Sequence[ScoredTransaction]) -> list[DateRollup]:
    """Fraud counts per UTC date, oldest date first."""
    rows = [
        DateRollup(
            date=date,
            total=tally.total,
            fraudulent=tally.fraudulent,
            suspicious=tally.suspicious,
            fraud_rate=format_rate(tally.fraudulent, tally.total),
        )
        for date, tally in _tally_by(transactions, _utc_date).items()
    ]
    return sorted(rows, key=lambda row: row.date)


def high_risk_regions(
    transactions: Sequence[ScoredTransaction],
    limit: int = TOP_N,
) -> list[RegionRollup]:
    """
    Locations ranked by region risk score.

    Region risk score weighs fraudulent transactions twice as heavily
    as suspicious ones: (2 * fraudulent + suspicious) / total * 100.
    """
    tallies = _tally_by(transactions, lambda scored: scored.transaction.resolved_location)
    rows = [
        RegionRollup(
            location=location,
            total=tally.total,
            fraudulent=tally.fraudulent,
            suspicious=tally.suspicious,
            fraud_rate=format_rate(tally.fraudulent, tally.total),
            risk_score=format_rate(tally.fraudulent * 2 + tally.suspicious, tally.total),
        )
        for location, tally in tallies.items()
    ]
    rows.sort(key=lambda row: float(row.risk_score), reverse=True)
    return rows[:limit]


def high_risk_users(
    transactions: Sequence[ScoredTransaction],
    limit: int = TOP_N,
) -> list[UserRollup]:
    """Users with at least one flagged transaction, highest fraud rate first."""
    tallies = _tally_by(transactions, lambda scored: scored.transaction.user_id)
    rows = [
        UserRollup(
            user_id=user_id,
            total=tally.total,
            fraudulent=tally.fraudulent,
            suspicious=tally.suspicious,
            fraud_rate=format_rate(tally.fraudulent, tally.total),
        )
        for user_id, tally in tallies.items()
        if tally.fraudulent > 0 or tally.suspicious > 0
    ]
    rows.sort(key=lambda row: float(row.fraud_rate), reverse=True)
    return rows[:limit]


def volume_by_date(transactions: Sequence[ScoredTransaction]) -> list[VolumeRollup]:
    """Transaction count and total amount per UTC date, oldest date first."""
    counts: dict[str, int] = {}
    amounts: dict[str, float] = {}
    for scored in transactions:
        date = _utc_date(scored)
        counts[date] = counts.get(date, 0) + 1
        amounts[date] = amounts.get(date, 0.0) + scored.transaction.amount

    rows = [
        VolumeRollup(date=date, count=count, total_amount=round(amounts[date], 2))
        for date, count in counts.items()
    ]
    return sorted(rows, key=lambda row: row.date)


def payment_method_distribution(
    transactions: Sequence[ScoredTransaction],
) -> list[PaymentMethodRollup]:
    """Share of transactions per payment method, most used first."""
    counts: dict[str, int] = {}
    amounts: dict[str, float] = {}
    for scored in transactions:
        method = scored.transaction.payment_method or UNKNOWN
        counts[method] = counts.get(method, 0) + 1
        amounts[method] = amounts.get(method, 0.0) + scored.transaction.amount

    rows = [
        PaymentMethodRollup(
            method=method,
            count=count,
            total_amount=round(amounts[method], 2),
            percentage=format_rate(count, len(transactions)),
        )
        for method, count in counts.items()
    ]
    rows.sort(key=lambda row: row.count, reverse=True)
    return rows

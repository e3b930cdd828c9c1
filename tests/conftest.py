"""
Pytest Configuration and Fixtures - Fraud Scoring Engine

Provides transaction/history factories and a scorer pinned to UTC so
hour-of-day checks do not depend on the host timezone.
"""

from datetime import datetime, timedelta, UTC
from typing import Any
from uuid import uuid4

import pytest

from fraud_scoring.schemas import (
    Classification,
    FraudAssessment,
    ScoredTransaction,
    Transaction,
    TransactionStatus,
)
from fraud_scoring.scoring import RiskScorer, ScoringPolicy


# 14:00 UTC, well outside the 02:00-05:59 unusual-hour band
BASE_TIME = datetime(2025, 3, 10, 14, 0, tzinfo=UTC)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (no infrastructure)")


def make_transaction(**overrides: Any) -> Transaction:
    """Build a transaction with sensible defaults."""
    base = {
        "transaction_id": f"txn_{uuid4().hex[:12]}",
        "user_id": "user_123",
        "amount": 100.0,
        "currency": "USD",
        "merchant_name": "Corner Grocer",
        "merchant_category": "Groceries",
        "payment_method": "Credit Card",
        "location": "New York",
        "country": "US",
        "device_id": "dev_home",
        "timestamp": BASE_TIME,
    }
    base.update(overrides)
    return Transaction(**base)


def make_history(
    count: int,
    end: datetime = BASE_TIME,
    spacing: timedelta = timedelta(days=1),
    **overrides: Any,
) -> list[Transaction]:
    """
    Build a chronologically ordered history of `count` transactions.

    The last entry sits one `spacing` before `end`.
    """
    return [
        make_transaction(timestamp=end - spacing * (count - i), **overrides)
        for i in range(count)
    ]


def make_scored(
    classification: Classification | None,
    score: float = 0.0,
    **overrides: Any,
) -> ScoredTransaction:
    """Build a scored transaction with a fixed classification."""
    transaction = make_transaction(**overrides)
    if classification is None:
        return ScoredTransaction(transaction=transaction)
    return ScoredTransaction(
        transaction=transaction,
        fraud_status=FraudAssessment(
            score=score,
            classification=classification,
            reasons=["No suspicious patterns detected"],
        ),
        status=TransactionStatus.APPROVED,
    )


@pytest.fixture
def utc_policy() -> ScoringPolicy:
    return ScoringPolicy(hour_timezone="UTC")


@pytest.fixture
def scorer(utc_policy: ScoringPolicy) -> RiskScorer:
    return RiskScorer(utc_policy)


@pytest.fixture
def sample_transaction() -> Transaction:
    return make_transaction()


@pytest.fixture
def familiar_history() -> list[Transaction]:
    """Five daily grocery purchases of 100 from the same place and device."""
    return make_history(5)

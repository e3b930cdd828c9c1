"""
Reporting Tests

Tests for the batch summary and grouped rollups.
"""

from datetime import datetime, UTC

from fraud_scoring.reporting import (
    format_rate,
    fraud_rate_by_date,
    high_risk_regions,
    high_risk_users,
    payment_method_distribution,
    summarize,
    volume_by_date,
)
from fraud_scoring.schemas import Classification

from .conftest import make_scored

F = Classification.FRAUDULENT
S = Classification.SUSPICIOUS
OK = Classification.SAFE


class TestSummarize:
    """Tests for the batch summary."""

    def test_counts_and_rate(self):
        batch = [make_scored(F)] * 2 + [make_scored(S)] * 3 + [make_scored(OK)] * 5

        summary = summarize(batch)

        assert summary.total == 10
        assert summary.fraudulent == 2
        assert summary.suspicious == 3
        assert summary.safe == 5
        assert summary.fraud_rate == "20.00"

    def test_empty(self):
        summary = summarize([])

        assert summary.total == 0
        assert summary.fraud_rate == "0"

    def test_unscored_counts_toward_total(self):
        summary = summarize([make_scored(F), make_scored(None)])

        assert summary.total == 2
        assert summary.fraudulent == 1
        assert summary.safe == 0
        assert summary.fraud_rate == "50.00"

    def test_order_independent(self):
        batch = [make_scored(OK), make_scored(F), make_scored(S)]

        assert summarize(batch) == summarize(list(reversed(batch)))

    def test_accepts_generators(self):
        assert summarize(make_scored(OK) for _ in range(3)).total == 3


class TestFormatRate:
    def test_rounding(self):
        assert format_rate(1, 3) == "33.33"
        assert format_rate(2, 3) == "66.67"
        assert format_rate(0, 4) == "0.00"
        assert format_rate(0, 0) == "0"


class TestRollups:
    """Tests for grouped reporting views."""

    def test_fraud_rate_by_date(self):
        day1 = datetime(2025, 3, 1, 12, tzinfo=UTC)
        day2 = datetime(2025, 3, 2, 12, tzinfo=UTC)
        batch = [
            make_scored(F, timestamp=day2),
            make_scored(OK, timestamp=day1),
            make_scored(S, timestamp=day2),
            make_scored(OK, timestamp=day2),
        ]

        rows = fraud_rate_by_date(batch)

        assert [row.date for row in rows] == ["2025-03-01", "2025-03-02"]
        assert rows[0].fraud_rate == "0.00"
        assert (rows[1].total, rows[1].fraudulent, rows[1].suspicious) == (3, 1, 1)
        assert rows[1].fraud_rate == "33.33"

    def test_high_risk_regions(self):
        batch = [
            make_scored(OK, location="Paris"),
            make_scored(S, location="Lagos"),
            make_scored(OK, location="Lagos"),
            make_scored(F, location="Miami"),
            make_scored(OK, location=None, country=None),
        ]

        rows = high_risk_regions(batch)

        assert [row.location for row in rows] == ["Miami", "Lagos", "Paris", "Unknown"]
        assert rows[0].risk_score == "200.00"
        assert rows[1].risk_score == "50.00"
        assert rows[1].fraud_rate == "0.00"

    def test_high_risk_regions_limit(self):
        batch = [make_scored(F, location=f"City {i}") for i in range(12)]

        rows = high_risk_regions(batch)

        assert len(rows) == 10
        assert rows[0].location == "City 0"

    def test_high_risk_users(self):
        batch = [
            make_scored(OK, user_id="clean"),
            make_scored(S, user_id="flagged"),
            make_scored(F, user_id="fraudster"),
            make_scored(OK, user_id="fraudster"),
        ]

        rows = high_risk_users(batch)

        assert [row.user_id for row in rows] == ["fraudster", "flagged"]
        assert rows[0].fraud_rate == "50.00"
        assert rows[1].fraud_rate == "0.00"

    def test_volume_by_date(self):
        batch = [
            make_scored(OK, amount=10.10, timestamp=datetime(2025, 3, 2, 1, tzinfo=UTC)),
            make_scored(OK, amount=20.20, timestamp=datetime(2025, 3, 2, 23, tzinfo=UTC)),
            make_scored(OK, amount=5.0, timestamp=datetime(2025, 3, 1, 8, tzinfo=UTC)),
        ]

        rows = volume_by_date(batch)

        assert [(row.date, row.count, row.total_amount) for row in rows] == [
            ("2025-03-01", 1, 5.0),
            ("2025-03-02", 2, 30.3),
        ]

    def test_payment_method_distribution(self):
        batch = [
            make_scored(OK, payment_method="Debit Card", amount=10.0),
            make_scored(OK, payment_method="Credit Card", amount=20.0),
            make_scored(OK, payment_method="Credit Card", amount=30.0),
            make_scored(OK, payment_method="Wallet", amount=40.0),
        ]

        rows = payment_method_distribution(batch)

        assert [row.method for row in rows] == ["Credit Card", "Debit Card", "Wallet"]
        assert rows[0].count == 2
        assert rows[0].total_amount == 50.0
        assert rows[0].percentage == "50.00"
        assert rows[1].percentage == "25.00"

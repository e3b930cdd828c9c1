"""
Schema Validation Tests

Tests for boundary validation and defaulting of transaction input,
and for the immutability of engine inputs and outputs.
"""

from datetime import datetime, timedelta, UTC

import pytest
from pydantic import ValidationError

from fraud_scoring.schemas import (
    Classification,
    FraudAssessment,
    Transaction,
    TransactionRequest,
)

from .conftest import BASE_TIME, make_transaction


class TestTransaction:
    """Tests for the Transaction schema."""

    @pytest.mark.parametrize("amount", [0, -5.0, float("inf"), float("nan")])
    def test_invalid_amount(self, amount):
        with pytest.raises(ValidationError):
            make_transaction(amount=amount)

    def test_unparseable_timestamp(self):
        with pytest.raises(ValidationError):
            make_transaction(timestamp="not a date")

    def test_iso_timestamp(self):
        txn = make_transaction(timestamp="2025-03-10T14:00:00Z")

        assert txn.timestamp == BASE_TIME

    def test_naive_timestamp_made_aware(self):
        """Offset-less timestamps are read as host-local time."""
        naive = datetime(2025, 3, 10, 14, 0)

        txn = make_transaction(timestamp=naive)

        assert txn.timestamp.tzinfo is not None
        assert txn.timestamp == naive.astimezone()

    def test_immutable(self):
        txn = make_transaction()

        with pytest.raises(ValidationError):
            txn.amount = 1.0

    def test_empty_identifiers_rejected(self):
        with pytest.raises(ValidationError):
            make_transaction(user_id="")

    @pytest.mark.parametrize(
        "location, country, expected",
        [
            ("Berlin", "Germany", "Berlin"),
            (None, "Germany", "Germany"),
            ("", "Germany", "Germany"),
            (None, None, "Unknown"),
        ],
    )
    def test_resolved_location(self, location, country, expected):
        txn = make_transaction(location=location, country=country)

        assert txn.resolved_location == expected


class TestTransactionRequest:
    """Tests for boundary defaulting."""

    def test_defaults(self):
        request = TransactionRequest(
            amount=42.5,
            merchant_name="Coffee Bar",
            merchant_category="Dining",
        )

        txn = request.to_transaction(user_id="user_9")

        assert isinstance(txn, Transaction)
        assert txn.transaction_id
        assert txn.user_id == "user_9"
        assert txn.currency == "USD"
        assert txn.payment_method == "Credit Card"
        assert txn.location == "Unknown"
        assert txn.country == "Unknown"
        assert txn.device_id == "device_user_9"
        assert datetime.now(UTC) - txn.timestamp < timedelta(minutes=1)

    def test_location_defaults_to_country(self):
        request = TransactionRequest(
            amount=10,
            merchant_name="Shop",
            merchant_category="Retail",
            country="Canada",
        )

        txn = request.to_transaction(user_id="user_9", transaction_id="txn_fixed")

        assert txn.transaction_id == "txn_fixed"
        assert txn.location == "Canada"
        assert txn.country == "Canada"

    def test_explicit_values_kept(self):
        request = TransactionRequest(
            amount=10,
            merchant_name="Shop",
            merchant_category="Retail",
            currency="EUR",
            payment_method="Wallet",
            location="Lisbon",
            country="Portugal",
            device_id="dev_42",
            timestamp=BASE_TIME,
        )

        txn = request.to_transaction(user_id="user_9")

        assert (txn.currency, txn.payment_method, txn.location, txn.device_id) == (
            "EUR", "Wallet", "Lisbon", "dev_42"
        )
        assert txn.timestamp == BASE_TIME

    @pytest.mark.parametrize(
        "missing", ["amount", "merchant_name", "merchant_category"]
    )
    def test_required_fields(self, missing):
        payload = {"amount": 10, "merchant_name": "Shop", "merchant_category": "Retail"}
        payload.pop(missing)

        with pytest.raises(ValidationError):
            TransactionRequest(**payload)


class TestFraudAssessment:
    """Tests for the assessment schema."""

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            FraudAssessment(score=100.5, classification=Classification.FRAUDULENT, reasons=["x"])

    def test_reasons_never_empty(self):
        with pytest.raises(ValidationError):
            FraudAssessment(score=0, classification=Classification.SAFE, reasons=[])

    def test_serializes_classification_value(self):
        assessment = FraudAssessment(
            score=7.0,
            classification=Classification.SAFE,
            reasons=["High-risk merchant category"],
        )

        assert assessment.model_dump(mode="json")["classification"] == "Safe"

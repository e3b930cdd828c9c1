"""
Transaction Schemas

Defines the canonical Transaction record that the scoring engine
consumes, plus the caller-facing TransactionRequest used at the
boundary to validate and default raw input before scoring.

A user's history is a chronologically ordered sequence of
Transactions (oldest first). The engine relies on that ordering for
its "most recent N" windows; the caller owns it.
"""

from datetime import datetime, UTC
from typing import Optional, Sequence
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


UNKNOWN = "Unknown"
DEFAULT_CURRENCY = "USD"
DEFAULT_PAYMENT_METHOD = "Credit Card"


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def _as_aware(value: datetime) -> datetime:
    # Offset-less ISO strings denote host-local time.
    if value.tzinfo is None:
        return value.astimezone()
    return value


class Transaction(BaseModel):
    """
    A single payment transaction.

    Immutable once constructed; the engine never mutates it.
    """

    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(
        ...,
        min_length=1,
        description="Unique transaction identifier",
    )
    user_id: str = Field(
        ...,
        min_length=1,
        description="Owning user identifier",
    )
    amount: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Transaction amount in major currency units",
    )
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="ISO 4217 currency code",
    )
    merchant_name: str = Field(
        default=UNKNOWN,
        description="Merchant display name",
    )
    merchant_category: str = Field(
        default=UNKNOWN,
        description="Merchant category (e.g., 'Groceries', 'Gambling')",
    )
    payment_method: str = Field(
        default=UNKNOWN,
        description="Payment method (e.g., 'Credit Card')",
    )
    location: Optional[str] = Field(
        default=None,
        description="Free-text location (city, region)",
    )
    country: Optional[str] = Field(
        default=None,
        description="Country name or code",
    )
    device_id: Optional[str] = Field(
        default=None,
        description="Device fingerprint identifier",
    )
    timestamp: datetime = Field(
        ...,
        description="When the transaction occurred",
    )

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return _as_aware(value)

    @property
    def resolved_location(self) -> str:
        """Location used for comparisons: location, else country, else Unknown."""
        return self.location or self.country or UNKNOWN


# Chronologically ordered (ascending) prior transactions of one user.
UserHistory = Sequence[Transaction]


class TransactionRequest(BaseModel):
    """
    Raw transaction input as submitted by a client.

    Validation and defaulting happen here, at the boundary, so the
    scoring engine only ever sees well-formed Transactions.
    """
    amount: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Transaction amount",
    )
    merchant_name: str = Field(
        ...,
        min_length=1,
        description="Merchant display name",
    )
    merchant_category: str = Field(
        ...,
        min_length=1,
        description="Merchant category",
    )
    currency: str = Field(default=DEFAULT_CURRENCY)
    payment_method: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)
    device_id: Optional[str] = Field(default=None)
    timestamp: Optional[datetime] = Field(
        default=None,
        description="Occurrence time; defaults to now (UTC)",
    )

    def to_transaction(
        self,
        user_id: str,
        transaction_id: Optional[str] = None,
    ) -> Transaction:
        """
        Build a fully defaulted Transaction for the given user.

        Args:
            user_id: Authenticated user submitting the transaction
            transaction_id: Explicit id (a uuid4 is generated if omitted)

        Returns:
            Transaction ready to be scored
        """
        return Transaction(
            transaction_id=transaction_id or str(uuid4()),
            user_id=user_id,
            amount=self.amount,
            currency=self.currency,
            merchant_name=self.merchant_name,
            merchant_category=self.merchant_category,
            payment_method=self.payment_method or DEFAULT_PAYMENT_METHOD,
            location=self.location or self.country or UNKNOWN,
            country=self.country or UNKNOWN,
            device_id=self.device_id or f"device_{user_id}",
            timestamp=self.timestamp or _utc_now(),
        )

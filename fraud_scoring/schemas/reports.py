"""
Reporting Schemas

Aggregate views over already-scored transactions. Rates are carried
as 2-decimal strings ("0" for empty groups) so they serialize the same
way the dashboards display them.
"""

from pydantic import BaseModel, Field


class FraudSummary(BaseModel):
    """Counts by classification plus the overall fraud rate."""
    total: int = Field(default=0, ge=0)
    fraudulent: int = Field(default=0, ge=0)
    suspicious: int = Field(default=0, ge=0)
    safe: int = Field(default=0, ge=0)
    fraud_rate: str = Field(
        default="0",
        description="fraudulent / total * 100, 2 decimals",
    )


class DateRollup(BaseModel):
    """Fraud counts for one calendar date (UTC)."""
    date: str
    total: int
    fraudulent: int
    suspicious: int
    fraud_rate: str


class RegionRollup(BaseModel):
    """Fraud counts for one location."""
    location: str
    total: int
    fraudulent: int
    suspicious: int
    fraud_rate: str
    risk_score: str = Field(
        ...,
        description="(2 * fraudulent + suspicious) / total * 100, 2 decimals",
    )


class UserRollup(BaseModel):
    """Fraud counts for one user."""
    user_id: str
    total: int
    fraudulent: int
    suspicious: int
    fraud_rate: str


class VolumeRollup(BaseModel):
    """Transaction volume for one calendar date (UTC)."""
    date: str
    count: int
    total_amount: float


class PaymentMethodRollup(BaseModel):
    """Share of transactions for one payment method."""
    method: str
    count: int
    total_amount: float
    percentage: str

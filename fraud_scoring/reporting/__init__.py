# Reporting Module
from .summary import summarize, format_rate
from .rollups import (
    fraud_rate_by_date,
    high_risk_regions,
    high_risk_users,
    volume_by_date,
    payment_method_distribution,
)

__all__ = [
    "summarize",
    "format_rate",
    "fraud_rate_by_date",
    "high_risk_regions",
    "high_risk_users",
    "volume_by_date",
    "payment_method_distribution",
]

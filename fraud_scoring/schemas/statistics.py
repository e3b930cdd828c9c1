"""
User Statistics Schema

Behavioral baseline derived from a user's history. Recomputed for
every scoring call and never persisted.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserStatistics(BaseModel):
    """
    Per-user baseline used by the risk factor detectors.

    Empty history yields zero amounts and empty tuples.
    """

    model_config = ConfigDict(frozen=True)

    avg_amount: float = Field(
        default=0.0,
        ge=0.0,
        description="Mean amount across history",
    )
    max_amount: float = Field(
        default=0.0,
        ge=0.0,
        description="Largest amount across history",
    )
    common_locations: tuple[str, ...] = Field(
        default=(),
        description="Up to 3 most frequent locations, most frequent first",
    )
    common_merchants: tuple[str, ...] = Field(
        default=(),
        description="Up to 3 most frequent merchant categories",
    )
    common_devices: tuple[Optional[str], ...] = Field(
        default=(),
        description="Up to 3 most frequent device identifiers (None counts as a value)",
    )
    transaction_hours: tuple[int, ...] = Field(
        default=(),
        description="Hour of day (0-23) of every historical transaction",
    )

"""
Scoring Policy Configuration

Defines the immutable weight and threshold table used to turn
detector outputs into a 0-100 score and a classification.

A policy can be loaded from a YAML file, e.g.:

    version: "1.1.0"
    hour_timezone: "UTC"
    fraudulent_threshold: 70
    suspicious_threshold: 40
    weights:
      amount_anomaly: 0.25
      velocity: 0.20
      ...

Weights must sum to 1.0 so that a transaction triggering every
detector at full strength scores exactly 100.
"""

import math
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..config import settings
from ..features import LOCAL_TIMEZONE, validate_timezone
from ..utils import get_logger

logger = get_logger("fraud_scoring.policy")


class RiskWeights(BaseModel):
    """
    Relative weight of each detector.

    Field names match detector names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    amount_anomaly: float = Field(default=0.25, ge=0.0, le=1.0)
    velocity: float = Field(default=0.20, ge=0.0, le=1.0)
    location_mismatch: float = Field(default=0.15, ge=0.0, le=1.0)
    time_anomaly: float = Field(default=0.15, ge=0.0, le=1.0)
    device_change: float = Field(default=0.10, ge=0.0, le=1.0)
    merchant_risk: float = Field(default=0.10, ge=0.0, le=1.0)
    pattern_deviation: float = Field(default=0.05, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _validate_total(self) -> "RiskWeights":
        total = sum(self.model_dump().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Risk weights must sum to 1.0 (got {total:.4f})")
        return self

    def weight_for(self, detector_name: str) -> float:
        """Weight of the named detector."""
        return getattr(self, detector_name)


class ScoringPolicy(BaseModel):
    """
    Complete scoring configuration.

    Constructed once and shared by reference; never mutated.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(
        default="1.0.0",
        description="Policy version for audit trail",
    )
    weights: RiskWeights = Field(default_factory=RiskWeights)
    fraudulent_threshold: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Score at or above this = Fraudulent",
    )
    suspicious_threshold: float = Field(
        default=40.0,
        ge=0.0,
        le=100.0,
        description="Score at or above this = Suspicious",
    )
    hour_timezone: str = Field(
        default=LOCAL_TIMEZONE,
        description="Timezone for hour-of-day checks: 'local', 'UTC', or IANA name",
    )

    @field_validator("hour_timezone")
    @classmethod
    def _validate_hour_timezone(cls, v: str) -> str:
        return validate_timezone(v)

    @model_validator(mode="after")
    def _validate_thresholds(self) -> "ScoringPolicy":
        if self.suspicious_threshold > self.fraudulent_threshold:
            raise ValueError(
                "suspicious_threshold must not exceed fraudulent_threshold"
            )
        return self


DEFAULT_POLICY = ScoringPolicy()


def load_policy(path: Path, fallback: ScoringPolicy = DEFAULT_POLICY) -> ScoringPolicy:
    """
    Load a scoring policy from YAML.

    Args:
        path: YAML policy file
        fallback: Policy returned when the file cannot be used

    Returns:
        Loaded policy, or `fallback` if the file is missing or invalid
    """
    try:
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        policy = ScoringPolicy(**{"hour_timezone": fallback.hour_timezone, **config})
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        # Keep scoring with the fallback policy
        logger.error("Scoring policy load failed (%s): %s", path, e)
        return fallback

    logger.info("Loaded scoring policy %s from %s", policy.version, path)
    return policy


@lru_cache
def get_default_policy() -> ScoringPolicy:
    """
    Get the process-wide policy built from settings.

    SCORING_POLICY_PATH selects a YAML file; SCORING_HOUR_TIMEZONE
    pins the hour-of-day timezone unless the file sets one.
    """
    fallback = DEFAULT_POLICY.model_copy(
        update={"hour_timezone": settings.scoring_hour_timezone}
    )
    if not settings.scoring_policy_path:
        return fallback
    return load_policy(Path(settings.scoring_policy_path), fallback=fallback)

# Detection Modules
from .detector import BaseDetector, DetectionResult
from .amount import AmountAnomalyDetector
from .velocity import VelocityDetector
from .location import LocationMismatchDetector
from .time_anomaly import TimeAnomalyDetector
from .device import DeviceChangeDetector
from .merchant import MerchantRiskDetector, HIGH_RISK_CATEGORIES
from .pattern import PatternDeviationDetector

__all__ = [
    "BaseDetector",
    "DetectionResult",
    "AmountAnomalyDetector",
    "VelocityDetector",
    "LocationMismatchDetector",
    "TimeAnomalyDetector",
    "DeviceChangeDetector",
    "MerchantRiskDetector",
    "HIGH_RISK_CATEGORIES",
    "PatternDeviationDetector",
]

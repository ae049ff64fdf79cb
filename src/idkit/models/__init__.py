"""Shared data types for idkit.

This package contains the format enumeration and the immutable result types
returned by codecs, the detector and the public API.
"""

from idkit.models.kinds import IdKind
from idkit.models.results import (
    ComparisonResult,
    DetectionCandidate,
    IdEncodings,
    InspectionResult,
    Timestamp,
    ValidationResult,
)

__all__ = [
    # Format tag
    "IdKind",
    # Results
    "Timestamp",
    "IdEncodings",
    "InspectionResult",
    "ValidationResult",
    "DetectionCandidate",
    "ComparisonResult",
]

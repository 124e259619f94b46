"""Metric synthesis: hot files, code churn, velocity, commit patterns."""

from .models import (
    ChurnEntry,
    CommitHistory,
    CommitPatterns,
    DevelopmentVelocity,
    HotFile,
    Impact,
    Intensity,
    Risk,
    TimeRange,
)
from .synthesizer import (
    MetricSynthesizer,
    classify_impact,
    classify_intensity,
    classify_risk,
    estimate_complexity,
)

__all__ = [
    "ChurnEntry",
    "CommitHistory",
    "CommitPatterns",
    "DevelopmentVelocity",
    "HotFile",
    "Impact",
    "Intensity",
    "MetricSynthesizer",
    "Risk",
    "TimeRange",
    "classify_impact",
    "classify_intensity",
    "classify_risk",
    "estimate_complexity",
]

"""Exception hierarchy for repo-pulse."""

from .analysis import (
    AnalysisError,
    DependencyReportError,
    HistorySourceError,
)
from .base import RepoPulseError
from .config import (
    ConfigurationError,
    InvalidConfigError,
)

__all__ = [
    "RepoPulseError",
    "AnalysisError",
    "HistorySourceError",
    "DependencyReportError",
    "ConfigurationError",
    "InvalidConfigError",
]

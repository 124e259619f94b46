"""Analysis-related exceptions: history sources, audit reports."""

from .base import RepoPulseError


class AnalysisError(RepoPulseError):
    """Base class for analysis-related errors."""

    pass


class HistorySourceError(AnalysisError):
    """Raised when a history source cannot produce a snapshot."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"History source '{source}' failed",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class DependencyReportError(AnalysisError):
    """Raised when a dependency audit report cannot be read."""

    def __init__(self, reason: str):
        super().__init__(
            "Invalid dependency report",
            details={"reason": reason},
        )
        self.reason = reason

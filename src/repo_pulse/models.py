"""Top-level analysis result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .health.models import RepositoryHealth
from .history.models import Branch
from .metrics.models import CommitHistory


@dataclass(frozen=True)
class BranchAnalysis:
    current_branch: str = "main"
    branches: tuple[Branch, ...] = ()

    @property
    def protected_count(self) -> int:
        return sum(1 for b in self.branches if b.protected)

    @property
    def protected_ratio(self) -> Optional[float]:
        """Share of protected branches, None when there are no branches."""
        if not self.branches:
            return None
        return self.protected_count / len(self.branches)


@dataclass(frozen=True)
class RepositoryAnalysis:
    commit_history: CommitHistory
    branch_analysis: BranchAnalysis
    repository_health: RepositoryHealth
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisMetadata:
    analyzed_commits: int
    analysis_time_ms: float
    last_updated: str  # ISO-8601


@dataclass(frozen=True)
class AnalysisResult:
    success: bool
    metadata: AnalysisMetadata
    data: Optional[RepositoryAnalysis] = None
    error: Optional[str] = None

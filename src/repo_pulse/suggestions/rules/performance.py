"""PERFORMANCE: suggestions from the code-churn table."""

from __future__ import annotations

from ...metrics.models import Risk
from ..models import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionMetrics,
    SuggestionPriority,
)
from .base import SuggestionInputs


class PerformanceRule:
    """High-risk churn and very complex files."""

    name = "performance"

    COMPLEXITY_THRESHOLD = 80

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]:
        churn = inputs.analysis.commit_history.code_churn
        suggestions: list[Suggestion] = []

        high_risk = [entry for entry in churn if entry.risk is Risk.HIGH]
        if high_risk:
            suggestions.append(
                Suggestion(
                    id="perf-high-churn-files",
                    category=SuggestionCategory.PERFORMANCE,
                    priority=SuggestionPriority.MEDIUM,
                    confidence=0.75,
                    title="Optimize High-Churn Files",
                    description=(
                        f"{len(high_risk)} files with high churn detected. These may benefit "
                        "from performance optimization."
                    ),
                    impact="Improves application performance and user experience",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Profile high-churn files for performance bottlenecks",
                        "Implement caching for frequently accessed data",
                        "Optimize database queries in these files",
                        "Consider lazy loading for heavy components",
                        "Add performance monitoring for these areas",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(high_risk),
                        target=0,
                        improvement="Optimize all high-churn files",
                    ),
                )
            )

        complex_files = [entry for entry in churn if entry.complexity > self.COMPLEXITY_THRESHOLD]
        if complex_files:
            suggestions.append(
                Suggestion(
                    id="perf-large-files",
                    category=SuggestionCategory.PERFORMANCE,
                    priority=SuggestionPriority.LOW,
                    confidence=0.6,
                    title="Consider Splitting Large Files",
                    description=(
                        f"{len(complex_files)} large files with high complexity detected. "
                        "Consider breaking them into smaller modules."
                    ),
                    impact="Improves code maintainability and performance",
                    effort=Effort.HIGH,
                    implementation=(
                        "Analyze dependencies and coupling in large files",
                        "Identify logical separation points",
                        "Create interfaces for better modularity",
                        "Implement gradual refactoring approach",
                        "Add comprehensive tests for refactored modules",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(complex_files),
                        target=0,
                        improvement="Break down all large files",
                    ),
                )
            )

        return suggestions

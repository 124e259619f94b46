"""QUALITY: churn management and commit-size discipline."""

from __future__ import annotations

from ..models import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionMetrics,
    SuggestionPriority,
)
from .base import SuggestionInputs


class QualityRule:
    name = "quality"

    CODE_CHURN_THRESHOLD = 60
    LARGE_TO_SMALL_RATIO = 0.5

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]:
        analysis = inputs.analysis
        health = analysis.repository_health
        sizes = analysis.commit_history.commit_patterns.commit_size_distribution
        suggestions: list[Suggestion] = []

        if health.code_churn_score < self.CODE_CHURN_THRESHOLD:
            suggestions.append(
                Suggestion(
                    id="quality-code-churn-management",
                    category=SuggestionCategory.QUALITY,
                    priority=SuggestionPriority.MEDIUM,
                    confidence=0.7,
                    title="Improve Code Churn Management",
                    description=(
                        "High code churn detected. Implement strategies to reduce unnecessary "
                        "code changes."
                    ),
                    impact="Improves code stability and maintainability",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Implement code review guidelines",
                        "Add automated testing for frequently changed code",
                        "Document architectural decisions",
                        "Consider feature flags for experimental features",
                        "Monitor and address technical debt regularly",
                    ),
                    metrics=SuggestionMetrics(
                        current=health.code_churn_score,
                        target=80,
                        improvement="33% improvement in code churn score",
                    ),
                )
            )

        large_commits = sizes.large + sizes.huge
        if large_commits > sizes.small * self.LARGE_TO_SMALL_RATIO:
            suggestions.append(
                Suggestion(
                    id="quality-test-coverage",
                    category=SuggestionCategory.QUALITY,
                    priority=SuggestionPriority.MEDIUM,
                    confidence=0.65,
                    title="Increase Test Coverage",
                    description=(
                        "Large commits detected, suggesting potential lack of comprehensive "
                        "testing. Consider improving test coverage."
                    ),
                    impact="Reduces bugs and improves code confidence",
                    effort=Effort.HIGH,
                    implementation=(
                        "Implement unit tests for new features",
                        "Add integration tests for critical paths",
                        "Set up test coverage reporting",
                        "Create testing guidelines for the team",
                        "Consider test-driven development practices",
                    ),
                    metrics=SuggestionMetrics(
                        current=large_commits,
                        target=sizes.small * 0.3,
                        improvement="Reduce large commits by 40%",
                    ),
                )
            )

        return suggestions

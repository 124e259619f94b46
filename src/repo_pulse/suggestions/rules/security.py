"""SECURITY: process-level security suggestions.

Triggers:
- any known dependency vulnerability, whatever its severity
- fewer than half of the branches are protected (no branches: no signal)
"""

from __future__ import annotations

from ..models import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionMetrics,
    SuggestionPriority,
)
from .base import SuggestionInputs


class SecurityRule:
    """Scanning process and branch protection coverage."""

    name = "security"

    MIN_PROTECTED_RATIO = 0.5

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]:
        suggestions: list[Suggestion] = []
        report = inputs.dependency_report

        if report is not None and report.vulnerabilities:
            suggestions.append(
                Suggestion(
                    id="sec-dependency-vulnerabilities",
                    category=SuggestionCategory.SECURITY,
                    priority=SuggestionPriority.CRITICAL,
                    confidence=0.95,
                    title="Implement Security Scanning",
                    description=(
                        "Vulnerabilities detected in dependencies. Implement automated security "
                        "scanning in CI/CD pipeline."
                    ),
                    impact="Prevents security breaches through early detection",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Set up automated vulnerability scanning",
                        "Implement security gates in CI/CD",
                        "Create security review checklist",
                        "Establish incident response process",
                        "Regular security dependency updates",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(report.vulnerabilities),
                        target=0,
                        improvement="Zero known vulnerabilities",
                    ),
                )
            )

        ratio = inputs.analysis.branch_analysis.protected_ratio
        if ratio is not None and ratio < self.MIN_PROTECTED_RATIO:
            suggestions.append(
                Suggestion(
                    id="sec-branch-protection",
                    category=SuggestionCategory.SECURITY,
                    priority=SuggestionPriority.HIGH,
                    confidence=0.8,
                    title="Implement Branch Protection Rules",
                    description=(
                        "Low branch protection coverage detected. Implement protection rules "
                        "for critical branches."
                    ),
                    impact="Prevents unauthorized code changes and improves code quality",
                    effort=Effort.LOW,
                    implementation=(
                        "Enable branch protection for main/master branches",
                        "Require pull request reviews",
                        "Require status checks to pass",
                        "Restrict direct pushes to protected branches",
                        "Set up code owners for sensitive areas",
                    ),
                    metrics=SuggestionMetrics(
                        current=ratio * 100,
                        target=80,
                        improvement="80% branch protection coverage",
                    ),
                )
            )

        return suggestions

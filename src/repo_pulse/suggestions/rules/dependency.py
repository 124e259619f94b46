"""DEPENDENCY: suggestions from the dependency audit report.

Skipped entirely when no report is supplied.

Triggers:
- any critical-severity vulnerability
- any high-severity vulnerability
- any license flagged warning or error
- more than 50 declared dependencies
"""

from __future__ import annotations

from ...dependencies import Compliance, Severity
from ..models import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionMetrics,
    SuggestionPriority,
)
from .base import SuggestionInputs


class DependencyRule:
    """Turns audit findings into remediation suggestions."""

    name = "dependency"

    MAX_DEPENDENCIES = 50
    MIN_TARGET_DEPENDENCIES = 20

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]:
        report = inputs.dependency_report
        if report is None:
            return []

        suggestions: list[Suggestion] = []
        critical = report.vulnerabilities_with(Severity.CRITICAL)
        high = report.vulnerabilities_with(Severity.HIGH)
        license_issues = report.license_issues

        if critical:
            suggestions.append(
                Suggestion(
                    id="dep-security-critical-vulnerabilities",
                    category=SuggestionCategory.SECURITY,
                    priority=SuggestionPriority.CRITICAL,
                    confidence=0.95,
                    title="Address Critical Security Vulnerabilities",
                    description=(
                        f"{len(critical)} critical security vulnerabilities found. "
                        "Immediate action required."
                    ),
                    impact="Prevents potential security breaches and data loss",
                    effort=Effort.HIGH,
                    implementation=(
                        "Update vulnerable packages immediately",
                        "Review security advisories for each vulnerability",
                        "Test applications after updates",
                        "Implement security monitoring",
                        "Enable automated dependency update tooling",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(critical),
                        target=0,
                        improvement="100% vulnerability resolution",
                    ),
                )
            )

        if high:
            suggestions.append(
                Suggestion(
                    id="dep-security-high-vulnerabilities",
                    category=SuggestionCategory.SECURITY,
                    priority=SuggestionPriority.HIGH,
                    confidence=0.9,
                    title="Address High-Severity Security Vulnerabilities",
                    description=(
                        f"{len(high)} high-severity security vulnerabilities found. "
                        "Schedule updates within the next sprint."
                    ),
                    impact="Reduces security risk and improves compliance",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Plan security updates in the next development cycle",
                        "Create tickets for each vulnerability",
                        "Test updates in staging environment first",
                        "Update documentation with security considerations",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(high),
                        target=0,
                        improvement="100% high-severity vulnerability resolution",
                    ),
                )
            )

        if license_issues:
            has_error = any(lic.compliance is Compliance.ERROR for lic in license_issues)
            suggestions.append(
                Suggestion(
                    id="dep-license-compliance-issues",
                    category=SuggestionCategory.LEGAL,
                    priority=SuggestionPriority.HIGH if has_error else SuggestionPriority.MEDIUM,
                    confidence=0.85,
                    title="Review License Compliance Issues",
                    description=(
                        f"{len(license_issues)} packages have license compliance issues that "
                        "may affect distribution and usage."
                    ),
                    impact="Ensures legal compliance and reduces business risk",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Review license terms for each flagged package",
                        "Consult legal team for compliance concerns",
                        "Consider replacing packages with incompatible licenses",
                        "Document license decisions and rationale",
                        "Implement license scanning in CI/CD pipeline",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(license_issues),
                        target=0,
                        improvement="100% license compliance",
                    ),
                )
            )

        stats = report.stats()
        if stats.total > self.MAX_DEPENDENCIES:
            suggestions.append(
                Suggestion(
                    id="dep-health-high-dependency-count",
                    category=SuggestionCategory.MAINTENANCE,
                    priority=SuggestionPriority.LOW,
                    confidence=0.6,
                    title="Consider Dependency Optimization",
                    description=(
                        "High number of dependencies detected. Consider optimizing to reduce "
                        "maintenance burden."
                    ),
                    impact="Reduces maintenance overhead and security surface",
                    effort=Effort.HIGH,
                    implementation=(
                        "Audit dependencies for actual usage",
                        "Remove unused dependencies",
                        "Consider monorepo structure for shared dependencies",
                        "Implement dependency size monitoring",
                        "Identify heavy dependencies with a bundle or wheel size report",
                    ),
                    metrics=SuggestionMetrics(
                        current=stats.total,
                        target=max(stats.total * 0.8, self.MIN_TARGET_DEPENDENCIES),
                        improvement="20% reduction in dependency count",
                    ),
                )
            )

        return suggestions

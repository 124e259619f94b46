"""COLLABORATION: suggestions from authorship and commit-hour patterns.

Triggers:
- the top author made more than half of all commits
- one of the three busiest commit hours falls outside 09:00-17:00
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

WORKDAY_START_HOUR = 9
WORKDAY_END_HOUR = 17


def is_after_hours(hour: int) -> bool:
    return hour < WORKDAY_START_HOUR or hour > WORKDAY_END_HOUR


def peak_hours(hour_of_day: tuple[int, ...], top_n: int = 3) -> list[int]:
    """Busiest hours with at least one commit, ties broken by earlier hour."""
    active = [(hour, count) for hour, count in enumerate(hour_of_day) if count > 0]
    active.sort(key=lambda item: (-item[1], item[0]))
    return [hour for hour, _ in active[:top_n]]


class CollaborationRule:
    """Detects concentrated contribution load and after-hours work."""

    name = "collaboration"

    TOP_CONTRIBUTOR_SHARE = 0.5

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]:
        history = inputs.analysis.commit_history
        suggestions: list[Suggestion] = []

        total_commits = sum(a.commits for a in history.authors)
        if history.authors and total_commits > 0:
            top_share = history.authors[0].commits / total_commits
            if top_share > self.TOP_CONTRIBUTOR_SHARE:
                suggestions.append(
                    Suggestion(
                        id="collab-uneven-contribution",
                        category=SuggestionCategory.COLLABORATION,
                        priority=SuggestionPriority.MEDIUM,
                        confidence=0.8,
                        title="Balance Contribution Load",
                        description=(
                            "Uneven contribution distribution detected. Consider redistributing "
                            "workload to prevent burnout."
                        ),
                        impact="Improves team sustainability and knowledge sharing",
                        effort=Effort.MEDIUM,
                        implementation=(
                            "Identify areas where junior developers can contribute",
                            "Implement mentorship programs",
                            "Share complex tasks among team members",
                            "Encourage code reviews from all team members",
                            "Document complex business logic for better onboarding",
                        ),
                        metrics=SuggestionMetrics(
                            current=top_share * 100,
                            target=30,
                            improvement="Reduce top contributor load by 40%",
                        ),
                    )
                )

        busiest = peak_hours(history.commit_patterns.hour_of_day)
        after_hours = [h for h in busiest if is_after_hours(h)]
        if after_hours:
            suggestions.append(
                Suggestion(
                    id="collab-work-life-balance",
                    category=SuggestionCategory.COLLABORATION,
                    priority=SuggestionPriority.LOW,
                    confidence=0.7,
                    title="Improve Work-Life Balance",
                    description=(
                        "Commits detected outside normal working hours. Consider establishing "
                        "healthy work boundaries."
                    ),
                    impact="Improves team well-being and long-term productivity",
                    effort=Effort.LOW,
                    implementation=(
                        "Establish core working hours for collaboration",
                        "Set expectations for response times",
                        "Encourage work-life balance in team culture",
                        "Consider flexible working arrangements",
                        "Monitor and address overtime trends",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(after_hours),
                        target=0,
                        improvement="Eliminate after-hours commits",
                    ),
                )
            )

        return suggestions

"""Rule groups for the suggestion engine, in evaluation order."""

from .base import SuggestionInputs, SuggestionRule
from .collaboration import CollaborationRule
from .dependency import DependencyRule
from .git_health import GitHealthRule
from .performance import PerformanceRule
from .quality import QualityRule
from .security import SecurityRule


def get_default_rules() -> list[SuggestionRule]:
    return [
        GitHealthRule(),
        DependencyRule(),
        CollaborationRule(),
        PerformanceRule(),
        SecurityRule(),
        QualityRule(),
    ]


__all__ = [
    "CollaborationRule",
    "DependencyRule",
    "GitHealthRule",
    "PerformanceRule",
    "QualityRule",
    "SecurityRule",
    "SuggestionInputs",
    "SuggestionRule",
    "get_default_rules",
]

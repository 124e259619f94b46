"""Data models for the suggestion engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class SuggestionCategory(Enum):
    DEVELOPMENT = "development"
    SECURITY = "security"
    PERFORMANCE = "performance"
    COLLABORATION = "collaboration"
    QUALITY = "quality"
    ARCHITECTURE = "architecture"
    LEGAL = "legal"
    MAINTENANCE = "maintenance"


class SuggestionPriority(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Higher is more urgent: critical=4 ... low=1."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    SuggestionPriority.CRITICAL: 4,
    SuggestionPriority.HIGH: 3,
    SuggestionPriority.MEDIUM: 2,
    SuggestionPriority.LOW: 1,
}


class Effort(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SuggestionMetrics:
    current: float
    target: float
    improvement: str


@dataclass(frozen=True)
class Suggestion:
    id: str
    category: SuggestionCategory
    priority: SuggestionPriority
    confidence: float  # 0.0-1.0, fixed per rule template
    title: str
    description: str
    impact: str
    effort: Effort
    implementation: tuple[str, ...]
    metrics: SuggestionMetrics
    actionable: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be between 0.0 and 1.0, got {self.confidence}")

    @property
    def sort_key(self) -> tuple[int, float]:
        """Ascending sort on this key puts the most urgent suggestion first."""
        return (-self.priority.rank, -self.confidence)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category.value,
            "priority": self.priority.value,
            "confidence": self.confidence,
            "title": self.title,
            "description": self.description,
            "impact": self.impact,
            "effort": self.effort.value,
            "actionable": self.actionable,
            "implementation": list(self.implementation),
            "metrics": {
                "current": self.metrics.current,
                "target": self.metrics.target,
                "improvement": self.metrics.improvement,
            },
        }


@dataclass(frozen=True)
class SuggestionContext:
    """Optional caller-supplied descriptors, carried alongside the analysis."""

    repository_owner: Optional[str] = None
    repository_name: Optional[str] = None
    language: Optional[str] = None
    team_size: Optional[int] = None
    project_type: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)


# Category -> name of the config toggle that gates it. None = always shown.
_CATEGORY_TOGGLES: dict[SuggestionCategory, Optional[str]] = {
    SuggestionCategory.SECURITY: "include_security_suggestions",
    SuggestionCategory.PERFORMANCE: "include_performance_suggestions",
    SuggestionCategory.COLLABORATION: "include_collaboration_suggestions",
    SuggestionCategory.QUALITY: "include_code_quality_suggestions",
    SuggestionCategory.DEVELOPMENT: None,
    SuggestionCategory.ARCHITECTURE: None,
    SuggestionCategory.LEGAL: None,
    SuggestionCategory.MAINTENANCE: None,
}

_untoggled = set(SuggestionCategory) - set(_CATEGORY_TOGGLES)
if _untoggled:
    raise RuntimeError(
        "Suggestion categories missing from the toggle table: "
        + ", ".join(sorted(c.value for c in _untoggled))
    )


@dataclass(frozen=True)
class SuggestionEngineConfig:
    """Category toggles plus ranking bounds. Immutable per engine instance.

    Attributes:
        include_security_suggestions: Keep security suggestions when filtering
        include_performance_suggestions: Keep performance suggestions
        include_collaboration_suggestions: Keep collaboration suggestions
        include_code_quality_suggestions: Keep quality suggestions
        min_confidence_score: Filtering drops suggestions below this
        max_suggestions: Generation keeps at most this many
    """

    include_security_suggestions: bool = True
    include_performance_suggestions: bool = True
    include_collaboration_suggestions: bool = True
    include_code_quality_suggestions: bool = True
    min_confidence_score: float = 0.6
    max_suggestions: int = 20

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_confidence_score <= 1.0:
            raise ValueError("min_confidence_score must be between 0.0 and 1.0")
        if self.max_suggestions < 0:
            raise ValueError("max_suggestions must be non-negative")

    def allows(self, category: Optional[SuggestionCategory]) -> bool:
        """Whether the category toggle lets a suggestion through."""
        if category is None:
            return True
        toggle = _CATEGORY_TOGGLES.get(category)
        if toggle is None:
            return True
        return bool(getattr(self, toggle))

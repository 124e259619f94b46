"""Rule-based improvement suggestions."""

from .engine import SuggestionEngine, rank_suggestions
from .models import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionContext,
    SuggestionEngineConfig,
    SuggestionMetrics,
    SuggestionPriority,
)

__all__ = [
    "Effort",
    "Suggestion",
    "SuggestionCategory",
    "SuggestionContext",
    "SuggestionEngine",
    "SuggestionEngineConfig",
    "SuggestionMetrics",
    "SuggestionPriority",
    "rank_suggestions",
]

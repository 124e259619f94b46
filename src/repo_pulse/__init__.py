"""
repo-pulse - repository history analytics and improvement suggestions.

Aggregates commit history into hot files, code churn, development velocity
and commit patterns, scores repository health, and runs a rule engine that
emits prioritized suggestions.
"""

__version__ = "0.1.0"

from .analyzer import GitAnalyzer
from .api import analyze
from .models import AnalysisResult, RepositoryAnalysis
from .suggestions import Suggestion, SuggestionEngine, SuggestionEngineConfig

__all__ = [
    "analyze",  # Main entry point
    "GitAnalyzer",
    "AnalysisResult",
    "RepositoryAnalysis",
    "Suggestion",
    "SuggestionEngine",
    "SuggestionEngineConfig",
]

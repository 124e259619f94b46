"""SuggestionEngine: runs the rule groups, ranks and filters their output."""

from __future__ import annotations

from typing import Optional, Sequence

from ..dependencies import DependencyReport
from ..logging_config import get_logger
from ..models import RepositoryAnalysis
from .models import Suggestion, SuggestionContext, SuggestionEngineConfig
from .rules import SuggestionInputs, SuggestionRule, get_default_rules

logger = get_logger(__name__)


def rank_suggestions(suggestions: Sequence[Suggestion]) -> list[Suggestion]:
    """Priority descending, then confidence descending.

    ``sorted`` is stable, so equal keys keep rule-group order.
    """
    return sorted(suggestions, key=lambda s: s.sort_key)


class SuggestionEngine:
    """Turn a completed repository analysis into ranked improvement suggestions.

    The engine holds only its configuration and the rule list; every call is
    independent.
    """

    def __init__(
        self,
        config: Optional[SuggestionEngineConfig] = None,
        rules: Optional[list[SuggestionRule]] = None,
    ):
        self.config = config or SuggestionEngineConfig()
        self._rules = rules if rules is not None else get_default_rules()

    def generate_suggestions(
        self,
        analysis: RepositoryAnalysis,
        dependency_report: Optional[DependencyReport] = None,
        context: Optional[SuggestionContext] = None,
    ) -> list[Suggestion]:
        """Evaluate every rule group and return the top suggestions.

        Args:
            analysis: Completed repository analysis
            dependency_report: Optional audit result; dependency rules are
                skipped without it
            context: Optional caller descriptors, carried to the rules

        Returns:
            At most ``config.max_suggestions`` suggestions, most urgent first.
            An empty list if any rule or the ranking step fails.
        """
        inputs = SuggestionInputs(
            analysis=analysis,
            dependency_report=dependency_report,
            context=context,
        )
        try:
            suggestions: list[Suggestion] = []
            for rule in self._rules:
                produced = rule.generate(inputs)
                logger.debug(f"Rule {rule.name}: {len(produced)} suggestions")
                suggestions.extend(produced)
            ranked = rank_suggestions(suggestions)[: self.config.max_suggestions]
        except Exception as e:
            logger.error(f"Suggestion generation failed: {e}")
            return []

        logger.info(f"Generated {len(suggestions)} suggestions, kept {len(ranked)}")
        return ranked

    def filter_suggestions(self, suggestions: Sequence[Suggestion]) -> list[Suggestion]:
        """Drop low-confidence suggestions and those in disabled categories."""
        return [
            s
            for s in suggestions
            if s.confidence >= self.config.min_confidence_score
            and self.config.allows(s.category)
        ]

"""Tests for suggestion models and engine configuration."""

import pytest

from repo_pulse.suggestions import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionEngineConfig,
    SuggestionMetrics,
    SuggestionPriority,
)


def make_suggestion(**kwargs) -> Suggestion:
    defaults = dict(
        id="s",
        category=SuggestionCategory.QUALITY,
        priority=SuggestionPriority.MEDIUM,
        confidence=0.7,
        title="Title",
        description="Description",
        impact="Impact",
        effort=Effort.LOW,
        implementation=("step one", "step two"),
        metrics=SuggestionMetrics(current=1, target=0, improvement="all of it"),
    )
    defaults.update(kwargs)
    return Suggestion(**defaults)


class TestSuggestion:
    @pytest.mark.parametrize("confidence", [-0.01, 1.01])
    def test_confidence_range_enforced(self, confidence):
        """Confidence outside [0, 1] is rejected at construction."""
        with pytest.raises(ValueError):
            make_suggestion(confidence=confidence)

    def test_priority_rank_order(self):
        ranks = [p.rank for p in SuggestionPriority]
        assert ranks == [4, 3, 2, 1]

    def test_to_dict(self):
        """to_dict gives enum values and plain lists."""
        data = make_suggestion().to_dict()
        assert data["category"] == "quality"
        assert data["priority"] == "medium"
        assert data["effort"] == "low"
        assert data["actionable"] is True
        assert data["implementation"] == ["step one", "step two"]
        assert data["metrics"] == {"current": 1, "target": 0, "improvement": "all of it"}


class TestSuggestionEngineConfig:
    def test_defaults(self):
        config = SuggestionEngineConfig()
        assert config.min_confidence_score == 0.6
        assert config.max_suggestions == 20

    @pytest.mark.parametrize(
        "kwargs",
        [{"min_confidence_score": 1.5}, {"min_confidence_score": -0.1}, {"max_suggestions": -1}],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            SuggestionEngineConfig(**kwargs)

    @pytest.mark.parametrize(
        "toggle,category",
        [
            ("include_security_suggestions", SuggestionCategory.SECURITY),
            ("include_performance_suggestions", SuggestionCategory.PERFORMANCE),
            ("include_collaboration_suggestions", SuggestionCategory.COLLABORATION),
            ("include_code_quality_suggestions", SuggestionCategory.QUALITY),
        ],
    )
    def test_toggles_gate_their_category(self, toggle, category):
        config = SuggestionEngineConfig(**{toggle: False})
        assert not config.allows(category)
        assert SuggestionEngineConfig().allows(category)

    @pytest.mark.parametrize(
        "category",
        [
            SuggestionCategory.DEVELOPMENT,
            SuggestionCategory.ARCHITECTURE,
            SuggestionCategory.LEGAL,
            SuggestionCategory.MAINTENANCE,
            None,
        ],
    )
    def test_untoggled_categories_always_pass(self, category):
        config = SuggestionEngineConfig(
            include_security_suggestions=False,
            include_performance_suggestions=False,
            include_collaboration_suggestions=False,
            include_code_quality_suggestions=False,
        )
        assert config.allows(category)

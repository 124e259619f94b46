"""Tests for configuration loading and merging."""

import pytest

from repo_pulse.config import AnalysisConfig, load_config
from repo_pulse.exceptions import ConfigurationError, InvalidConfigError, RepoPulseError
from repo_pulse.suggestions import SuggestionEngineConfig


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.max_commits == 1000
        assert config.include_branches is True
        assert config.verbosity == "normal"
        assert config.suggestions == SuggestionEngineConfig()
        assert config.since_datetime is None

    def test_window_parsing(self):
        config = AnalysisConfig(since="2024-01-01", until="2024-02-01T00:00:00Z")
        assert config.since_datetime.tzinfo is not None
        assert config.since_datetime < config.until_datetime

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_commits": -1},
            {"hot_file_limit": -1},
            {"verbosity": "loud"},
            {"since": "2024-02-01", "until": "2024-01-01"},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            AnalysisConfig(**kwargs)


class TestLoadConfig:
    def test_no_sources(self):
        assert load_config() == AnalysisConfig()

    def test_project_file(self, tmp_path, monkeypatch):
        """./repo-pulse.toml is discovered, including its [suggestions] table."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "repo-pulse.toml").write_text(
            "max_commits = 50\n\n[suggestions]\nmin_confidence_score = 0.75\n"
        )
        config = load_config()
        assert config.max_commits == 50
        assert config.suggestions.min_confidence_score == 0.75
        assert config.suggestions.max_suggestions == 20

    def test_explicit_file_beats_project_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "repo-pulse.toml").write_text("max_commits = 50\n")
        explicit = tmp_path / "custom.toml"
        explicit.write_text("max_commits = 75\n")
        assert load_config(config_file=explicit).max_commits == 75

    def test_env_beats_file_and_overrides_beat_env(self, tmp_path, monkeypatch):
        explicit = tmp_path / "custom.toml"
        explicit.write_text("max_commits = 75\n")
        monkeypatch.setenv("REPO_PULSE_MAX_COMMITS", "30")
        monkeypatch.setenv("REPO_PULSE_INCLUDE_BRANCHES", "off")
        monkeypatch.setenv("REPO_PULSE_SUGGESTIONS_MAX_SUGGESTIONS", "3")

        config = load_config(config_file=explicit)
        assert config.max_commits == 30
        assert config.include_branches is False
        assert config.suggestions.max_suggestions == 3

        assert load_config(config_file=explicit, max_commits=10).max_commits == 10

    def test_log_file_from_env(self, monkeypatch):
        monkeypatch.setenv("REPO_PULSE_LOG_FILE", "pulse.log")
        assert load_config().log_file == "pulse.log"

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("REPO_PULSE_MAX_COMMITS", "30")
        assert load_config(max_commits=None).max_commits == 30

    def test_verbosity_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_suggestions_override_merges(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "repo-pulse.toml").write_text("[suggestions]\nmax_suggestions = 5\n")
        config = load_config(suggestions={"min_confidence_score": 0.9})
        assert config.suggestions.max_suggestions == 5
        assert config.suggestions.min_confidence_score == 0.9

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("REPO_PULSE_MAX_COMMITS", "lots")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "REPO_PULSE_MAX_COMMITS"

    def test_missing_file(self, tmp_path):
        with pytest.raises(RepoPulseError, match="not found"):
            load_config(config_file=tmp_path / "missing.toml")

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_commits = = 1\n")
        with pytest.raises(RepoPulseError):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "extra.toml"
        path.write_text("colour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_invalid_suggestion_bounds(self):
        with pytest.raises(ConfigurationError):
            load_config(suggestions={"min_confidence_score": 1.5})

"""Configuration loading and management for repo-pulse.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.repo-pulse.toml)
    3. Project config (./repo-pulse.toml)
    4. Explicit config file
    5. REPO_PULSE_* environment variables
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, max_commits=200)
    >>> config.verbosity
    'verbose'
    >>> config.max_commits
    200
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError, RepoPulseError
from .history.models import parse_timestamp
from .suggestions.models import SuggestionEngineConfig

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "REPO_PULSE_"
SUGGESTIONS_ENV_PREFIX = "REPO_PULSE_SUGGESTIONS_"
GLOBAL_CONFIG_NAME = ".repo-pulse.toml"
PROJECT_CONFIG_NAME = "repo-pulse.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        History window:
            max_commits: Keep only the newest N commits (0 = unlimited)
            since: ISO-8601 lower bound on commit time, inclusive
            until: ISO-8601 upper bound on commit time, inclusive
            include_branches: Score branch protection from source branches

        Metric limits:
            hot_file_limit: Number of hot files reported
            peak_day_limit: Number of peak development days reported

        Output control:
            verbosity: Logging verbosity level
            log_file: Also append log records to this file

        Suggestions:
            suggestions: Engine toggles and ranking bounds ([suggestions] table)
    """

    max_commits: int = 1000
    since: Optional[str] = None
    until: Optional[str] = None
    include_branches: bool = True

    hot_file_limit: int = 20
    peak_day_limit: int = 5

    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    suggestions: SuggestionEngineConfig = field(default_factory=SuggestionEngineConfig)

    def __post_init__(self) -> None:
        if self.max_commits < 0:
            raise ValueError("max_commits must be non-negative")
        if self.hot_file_limit < 0:
            raise ValueError("hot_file_limit must be non-negative")
        if self.peak_day_limit < 0:
            raise ValueError("peak_day_limit must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError(f"verbosity must be quiet, normal or verbose, got '{self.verbosity}'")

        since, until = self.since_datetime, self.until_datetime
        if since is not None and until is not None and since > until:
            raise ValueError("since must not be later than until")

    @property
    def since_datetime(self) -> Optional[datetime]:
        return parse_timestamp(self.since) if self.since else None

    @property
    def until_datetime(self) -> Optional[datetime]:
        return parse_timestamp(self.until) if self.until else None


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        RepoPulseError: If a config file is missing or unreadable
        InvalidConfigError: If an environment variable cannot be parsed
        ConfigurationError: If the merged values are invalid
    """
    merged: dict[str, Any] = {}
    suggestions: dict[str, Any] = {}

    def _merge(values: dict[str, Any]) -> None:
        nested = values.pop("suggestions", None)
        if isinstance(nested, SuggestionEngineConfig):
            suggestions.clear()
            suggestions.update(nested.__dict__)
        elif isinstance(nested, dict):
            suggestions.update(nested)
        merged.update(values)

    # 1. Global config
    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            _merge(_load_toml_file(global_config))
        except Exception as e:
            raise RepoPulseError(f"Invalid global config '{global_config}': {e}")

    # 2. Project config
    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            _merge(_load_toml_file(project_config))
        except Exception as e:
            raise RepoPulseError(f"Invalid project config '{project_config}': {e}")

    # 3. Explicit config file
    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise RepoPulseError(f"Config file not found: {config_file}")
        try:
            _merge(_load_toml_file(config_file))
        except Exception as e:
            raise RepoPulseError(f"Invalid config file '{config_file}': {e}")

    # 4. Environment variables
    _merge(_load_env_vars(AnalysisConfig, ENV_PREFIX))
    suggestions.update(_load_env_vars(SuggestionEngineConfig, SUGGESTIONS_ENV_PREFIX))

    # 5. CLI overrides
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]
    _merge(overrides)

    try:
        merged["suggestions"] = SuggestionEngineConfig(**suggestions)
    except TypeError as e:
        raise ConfigurationError(f"Invalid [suggestions] config: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid [suggestions] config: {e}")

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars(config_cls: type, prefix: str) -> dict[str, Any]:
    """Collect ``<prefix><FIELD>`` environment variables for a config dataclass.

    Nested dataclass fields are skipped; they have their own prefix.
    """
    type_hints = get_type_hints(config_cls)
    result: dict[str, Any] = {}

    for field_name in config_cls.__dataclass_fields__:
        env_key = f"{prefix}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that can't be set from the environment.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)

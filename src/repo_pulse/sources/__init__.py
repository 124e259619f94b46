"""History sources: fixture, local git, JSON export."""

from .base import DataSource
from .fixture import FixtureSource
from .git_log import GitLogSource, parse_git_log, resolve_rename
from .json_file import JsonFileSource

__all__ = [
    "DataSource",
    "FixtureSource",
    "GitLogSource",
    "JsonFileSource",
    "parse_git_log",
    "resolve_rename",
]

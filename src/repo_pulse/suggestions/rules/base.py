"""Shared inputs and interface for suggestion rule groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from ...dependencies import DependencyReport
from ...models import RepositoryAnalysis
from ..models import Suggestion, SuggestionContext


@dataclass(frozen=True)
class SuggestionInputs:
    analysis: RepositoryAnalysis
    dependency_report: Optional[DependencyReport] = None
    context: Optional[SuggestionContext] = None


class SuggestionRule(Protocol):
    """A rule group: reads one slice of the inputs, emits zero or more suggestions."""

    name: str

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]: ...

"""DataSource protocol: where a history snapshot comes from."""

from __future__ import annotations

from typing import Protocol

from ..history.models import HistorySnapshot


class DataSource(Protocol):
    """Produces one complete history snapshot per ``fetch`` call."""

    name: str

    def fetch(self) -> HistorySnapshot: ...

"""Read a pre-fetched history export from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from ..exceptions import HistorySourceError
from ..history.models import HistorySnapshot
from ..logging_config import get_logger

logger = get_logger(__name__)


class JsonFileSource:
    """History from a JSON document (see ``HistorySnapshot.from_dict``)."""

    name = "json"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def fetch(self) -> HistorySnapshot:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise HistorySourceError(str(self.path), f"cannot read file: {e}")
        except json.JSONDecodeError as e:
            raise HistorySourceError(str(self.path), f"invalid JSON: {e}")

        if not isinstance(data, (dict, list)):
            raise HistorySourceError(str(self.path), "expected a JSON object or list")

        try:
            snapshot = HistorySnapshot.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise HistorySourceError(str(self.path), f"malformed history: {e}")

        logger.debug(f"Loaded {snapshot.total_commits} commits from {self.path}")
        return snapshot

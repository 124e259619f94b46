"""Base exception for repo-pulse."""

from typing import Any, Dict, Optional


class RepoPulseError(Exception):
    """Base exception for all repo-pulse errors.

    ``details`` carries machine-readable context (source names, config keys)
    and is rendered after the message.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "message": self.message, "details": dict(self.details)}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"

"""Alert records emitted by the rule engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

AlertSeverity = Literal["high", "medium", "low"]

SEVERITY_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}


@dataclass(frozen=True, slots=True)
class Alert:
    """A user-facing financial-health warning.

    Only ``severity`` is meant for branching; the other text fields are display
    strings.
    """

    id: str
    severity: AlertSeverity
    title: str
    message: str
    action: str

    @property
    def rank(self) -> int:
        return SEVERITY_ORDER[self.severity]

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "severity": self.severity,
            "title": self.title,
            "message": self.message,
            "action": self.action,
        }

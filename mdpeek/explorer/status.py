"""Explorer status-line message types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Severity(enum.Enum):
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class StatusMessage:
    text: str
    severity: Severity

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

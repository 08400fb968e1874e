from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExpansionError(Exception):
    """Coded error for configuration and CLI input. expand() itself never raises."""

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        where = ":".join(part for part in (self.file, self.path) if part)
        if not where:
            return f"{self.code}: {self.message}"
        return f"{where}: {self.code}: {self.message}"


class ConfigLoadError(ExpansionError):
    pass


class ConfigValidationError(ExpansionError):
    pass

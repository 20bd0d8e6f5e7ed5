"""Problems reported by config file validation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from skillset.types import JsonObject


@dataclass(frozen=True)
class ValidationError:
    """One config problem: stable code, file, dotted key path and message."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    @property
    def location(self) -> str:
        if not self.field:
            return self.path
        return f"{self.path} ({self.field})"

    def format(self) -> str:
        line = f"[{self.code}] {self.location} {self.message}"
        if self.hint:
            line = f"{line} ({self.hint})"
        return line

    def to_dict(self) -> JsonObject:
        return {
            "code": self.code,
            "path": self.path,
            "field": self.field,
            "message": self.message,
            "hint": self.hint or None,
        }


def sort_errors(errors: Iterable[ValidationError]) -> list[ValidationError]:
    """Order errors by file, then key path, then code."""
    return sorted(errors, key=lambda error: (error.path, error.field, error.code))


def format_errors(errors: Iterable[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
